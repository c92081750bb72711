"""
Term Model for json-os.

Immutable graph terms (named nodes, literals and translator-minted
blank nodes) plus namespace helpers for building URIs.

Named nodes compare by URI after schema.org scheme normalization, so
``named_node("https://schema.org/Person")`` and
``named_node("http://schema.org/Person")`` are equal and hash alike.
The URI string itself is never rewritten.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

# ── Namespace constants ─────────────────────────────────────────────

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDF_TYPE = f"{RDF_NS}type"

SCHEMA_HTTP = "http://schema.org/"
SCHEMA_HTTPS = "https://schema.org/"

NAMED_NODE = "NamedNode"
LITERAL = "Literal"
BLANK_NODE = "BlankNode"


# ── URI comparison helpers ──────────────────────────────────────────


def normalize_uri(uri: Any) -> Any:
    """Map ``https://schema.org/X`` onto ``http://schema.org/X``.

    Non-string values are returned unchanged.
    """
    if isinstance(uri, str) and uri.startswith(SCHEMA_HTTPS):
        return SCHEMA_HTTP + uri[len(SCHEMA_HTTPS):]
    return uri


def term_uri(value: Any) -> Any:
    """Return the comparable identifier of a term or plain string.

    Term objects yield their ``uri`` (falling back to ``value`` for
    literals); anything else is returned as is.
    """
    if isinstance(value, (NamedNode, Literal)):
        return value.uri or value.value
    return value


def same_uri(a: Any, b: Any) -> bool:
    """Compare two terms/strings with schema.org scheme equivalence."""
    return normalize_uri(term_uri(a)) == normalize_uri(term_uri(b))


def schema_org_variants(uri: str) -> tuple[str, ...]:
    """Return *uri* plus its http/https schema.org counterpart, if any."""
    if uri.startswith(SCHEMA_HTTP):
        return uri, SCHEMA_HTTPS + uri[len(SCHEMA_HTTP):]
    if uri.startswith(SCHEMA_HTTPS):
        return uri, SCHEMA_HTTP + uri[len(SCHEMA_HTTPS):]
    return (uri,)


def to_text(value: Any) -> str:
    """Render a JSON scalar the way it reads in JSON text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        if abs(value) < 1e21:
            return str(int(value))
    return str(value)


# ── Terms ───────────────────────────────────────────────────────────


@dataclass(frozen=True, eq=False)
class NamedNode:
    """A graph term identified by a URI."""

    uri: str

    @property
    def value(self) -> str:
        return self.uri

    @property
    def term_type(self) -> str:
        return NAMED_NODE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedNode):
            return NotImplemented
        return normalize_uri(self.uri) == normalize_uri(other.uri)

    def __hash__(self) -> int:
        return hash((NAMED_NODE, normalize_uri(self.uri)))

    def __str__(self) -> str:
        return self.uri


@dataclass(frozen=True, eq=False)
class BlankNode(NamedNode):
    """A document-local node minted for an anonymous nested object.

    ``uri`` is the synthesized identifier; ``parent``, ``segment`` and
    ``index`` record the structural path it was derived from.
    """

    parent: str = ""
    segment: str = ""
    index: Optional[int] = None

    @property
    def term_type(self) -> str:
        return BLANK_NODE


@dataclass(frozen=True)
class Literal:
    """A scalar value held as text, with no datatype or language."""

    value: str

    @property
    def uri(self) -> None:
        return None

    @property
    def term_type(self) -> str:
        return LITERAL

    def __str__(self) -> str:
        return self.value


# ── Constructors ────────────────────────────────────────────────────


def named_node(uri: str) -> NamedNode:
    """Wrap a URI string; any string is accepted."""
    return NamedNode(uri)


def literal(value: Any) -> Literal:
    """Stringify *value* and wrap it as a :class:`Literal`."""
    return Literal(to_text(value))


@dataclass(frozen=True)
class Namespace:
    """Callable URI factory: ``Namespace(base)(name)`` → ``base + name``."""

    base: str

    @property
    def uri(self) -> str:
        return self.base

    def __call__(self, local_name: str) -> NamedNode:
        return named_node(self.base + local_name)


def namespace(base: str) -> Namespace:
    """Return a :class:`Namespace` that appends local names to *base*."""
    return Namespace(base)


RDF = namespace(RDF_NS)
SCHEMA = namespace(SCHEMA_HTTP)
