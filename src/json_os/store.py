"""
Triple Store for json-os.

An append-only, insertion-ordered list of (subject, predicate, object)
statements with a small pattern-matching read surface.  Every read is a
linear scan; documents translated into a store are small enough that
no index is needed.

Subjects and predicates are matched with schema.org scheme equivalence
(``http://schema.org/X`` matches ``https://schema.org/X``).  Objects may
be stored as terms or as raw JSON scalars; raw scalars come back
wrapped as :class:`~json_os.terms.Literal` on read.

Absence is a value, not a fault: single-result reads return ``None``
and multi-result reads return an empty container.
"""

from __future__ import annotations

from typing import Any, Iterator, NamedTuple, Optional, Union

from json_os.terms import (
    Literal,
    NamedNode,
    RDF_TYPE,
    literal,
    normalize_uri,
    same_uri,
    schema_org_variants,
    term_uri,
    to_text,
)

Term = Union[NamedNode, Literal]
Scalar = Union[str, int, float, bool, None]


class Triple(NamedTuple):
    """A single stored statement."""

    subject: NamedNode
    predicate: NamedNode
    object: Union[Term, Scalar]


class TripleStore:
    """Append-only triple collection with URI-equivalence matching."""

    def __init__(self) -> None:
        self._triples: list[Triple] = []

    # ── Writing ──────────────────────────────────────────────────

    def add(self, subject: NamedNode, predicate: NamedNode, obj: Any) -> None:
        """Append a triple.  Duplicates are kept."""
        self._triples.append(Triple(subject, predicate, obj))

    # ── Reading ──────────────────────────────────────────────────

    def any_value(self, subject: Any, predicate: Any) -> Optional[str]:
        """Text of the first matching object, or ``None``."""
        for t in self._match(subject, predicate):
            if isinstance(t.object, (NamedNode, Literal)):
                return t.object.value
            return None if t.object is None else to_text(t.object)
        return None

    def any(self, subject: Any, predicate: Any) -> Optional[Term]:
        """First matching object as a term, or ``None``."""
        for t in self._match(subject, predicate):
            return _as_term(t.object)
        return None

    def each(self, subject: Any, predicate: Any) -> list[Term]:
        """All matching objects as terms, in insertion order."""
        results: list[Term] = []
        for t in self._match(subject, predicate):
            term = _as_term(t.object)
            if term is not None:
                results.append(term)
        return results

    def find_type_uris(self, subject: Any) -> dict[str, bool]:
        """All ``rdf:type`` URIs of *subject* → ``True``.

        schema.org types are reported under both the http and the https
        scheme so that exact membership tests succeed for either form.
        """
        result: dict[str, bool] = {}
        for t in self._triples:
            if not same_uri(t.subject, subject):
                continue
            if normalize_uri(term_uri(t.predicate)) != RDF_TYPE:
                continue
            uri = _type_uri(t.object)
            if uri:
                for variant in schema_org_variants(uri):
                    result[variant] = True
        return result

    # ── Introspection ────────────────────────────────────────────

    @property
    def triples(self) -> tuple[Triple, ...]:
        """Snapshot of every stored triple, in insertion order."""
        return tuple(self._triples)

    def subjects(self) -> list[NamedNode]:
        """Distinct subjects in first-seen order."""
        seen: dict[NamedNode, None] = {}
        for t in self._triples:
            seen.setdefault(t.subject, None)
        return list(seen)

    def to_ntriples(self) -> str:
        """Serialize the store as N-Triples, one statement per line.

        Literal objects are written as plain strings of their text.
        Triples whose object is ``None`` are omitted.
        """
        lines: list[str] = []
        for s, p, o in self._triples:
            if o is None:
                continue
            lines.append(f"<{s.uri}> <{p.uri}> {_format_object(o)} .")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._triples)

    def __iter__(self) -> Iterator[Triple]:
        return iter(self.triples)

    def __repr__(self) -> str:
        return f"TripleStore({len(self._triples)} triples)"

    # ── Internal ─────────────────────────────────────────────────

    def _match(self, subject: Any, predicate: Any) -> Iterator[Triple]:
        for t in self._triples:
            if same_uri(t.subject, subject) and same_uri(t.predicate, predicate):
                yield t


def create_store() -> TripleStore:
    """Return a new, empty :class:`TripleStore`."""
    return TripleStore()


# -- Helpers ------------------------------------------------------------------


def _as_term(obj: Any) -> Optional[Term]:
    if isinstance(obj, (NamedNode, Literal)):
        return obj
    if obj is None:
        return None
    return literal(obj)


def _type_uri(obj: Any) -> Optional[str]:
    """URI of a type object; literals carry none."""
    if isinstance(obj, NamedNode):
        return obj.uri
    if isinstance(obj, str):
        return obj
    return None


def _format_object(value: Any) -> str:
    """Format a stored object as an N-Triples term.

    Literals carry no datatype, so a raw scalar and the
    :class:`Literal` wrapping it serialize identically.
    """
    if isinstance(value, NamedNode):
        return f"<{value.uri}>"
    return f'"{_escape_ntriples(_as_term(value).value)}"'


def _escape_ntriples(s: str) -> str:
    """Escape a string for N-Triples."""
    return (
        s.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
