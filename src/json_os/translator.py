"""
JSON-LD → Triple Store translation for json-os.

Walks a parsed JSON-LD object tree and emits triples into a
:class:`~json_os.store.TripleStore`.  This is deliberately a small
subset of JSON-LD:

  - ``@context`` is honoured only as a flat mapping of prefix → base
    string.  Array contexts, nested definitions and remote contexts
    are ignored.
  - Property keys are expanded by their first matching ``prefix:``;
    anything else (absolute URIs, unknown prefixes, bare terms) is
    kept verbatim.
  - Nested objects with ``@id`` are linked by reference only.  Nested
    objects without ``@id`` become blank nodes whose ids are derived
    from the parent subject and the property key.  An array directly
    inside an array becomes a blank node too, with one property per
    element index (``"0"``, ``"1"``, ...).

Translation never raises on odd input; it degrades by omission.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Mapping, Optional

from json_os.store import TripleStore
from json_os.terms import RDF, BlankNode, NamedNode, named_node

logger = logging.getLogger(__name__)

DEFAULT_ROOT_FRAGMENT = "#thing"

_RDF_TYPE = RDF("type")


# ── Value shapes ────────────────────────────────────────────────────


class ValueShape(enum.Enum):
    """The closed set of JSON value shapes the translator handles."""

    ARRAY = "array"
    REFERENCE = "reference"  # object carrying a non-empty @id
    EMBEDDED = "embedded"    # object without @id
    SCALAR = "scalar"        # str, number, bool, null


def classify(value: Any) -> ValueShape:
    """Return the :class:`ValueShape` of a JSON value."""
    if isinstance(value, list):
        return ValueShape.ARRAY
    if isinstance(value, Mapping):
        return ValueShape.REFERENCE if value.get("@id") else ValueShape.EMBEDDED
    return ValueShape.SCALAR


# ── Context handling ────────────────────────────────────────────────


def build_context(document: Any) -> dict[str, str]:
    """Extract the prefix → base mapping from ``document["@context"]``.

    Only a plain mapping is understood, and only its string-valued
    entries are kept.  Any other shape yields an empty context.
    """
    raw = document.get("@context") if isinstance(document, Mapping) else None
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.debug("Ignoring unsupported @context of type %s", type(raw).__name__)
        return {}
    return {k: v for k, v in raw.items() if isinstance(v, str)}


def resolve_prefix(key: str, context: Mapping[str, str]) -> Optional[str]:
    """Expand a property key into a predicate URI.

    Returns ``None`` for ``@`` keywords.  Otherwise the first context
    prefix matching ``"prefix:"`` at the start of the key is replaced
    by its base; keys matching no prefix are returned unchanged.
    """
    if key.startswith("@"):
        return None
    for prefix, base in context.items():
        head = prefix + ":"
        if key.startswith(head):
            return base + key[len(head):]
    return key


# ── Blank nodes ─────────────────────────────────────────────────────


class BlankNodeIssuer:
    """Mints blank nodes for one translation and keeps their ids unique.

    The id is derived from the structural path
    (``parent_segment`` or ``parent_segment_index``).  When a different
    path would reproduce an id already handed out, a ``~n`` suffix is
    appended until the id is fresh.
    """

    def __init__(self) -> None:
        self._issued: set[str] = set()

    def issue(self, parent: str, segment: str, index: Optional[int] = None) -> BlankNode:
        candidate = f"{parent}_{segment}"
        if index is not None:
            candidate = f"{candidate}_{index}"
        uri = candidate
        n = 1
        while uri in self._issued:
            n += 1
            uri = f"{candidate}~{n}"
        if uri != candidate:
            logger.debug("Blank node id %s already issued, using %s", candidate, uri)
        self._issued.add(uri)
        return BlankNode(uri, parent=parent, segment=segment, index=index)

    def __contains__(self, uri: object) -> bool:
        return uri in self._issued

    def __len__(self) -> int:
        return len(self._issued)


# ── Translation ─────────────────────────────────────────────────────


def root_subject_uri(document: Any, base_uri: str) -> str:
    """``base_uri`` + the document's ``@id`` (default ``#thing``)."""
    node_id = document.get("@id") if isinstance(document, Mapping) else None
    return base_uri + (_id_text(node_id) or DEFAULT_ROOT_FRAGMENT)


def translate(
    document: Any,
    base_uri: str,
    store: Optional[TripleStore] = None,
) -> NamedNode:
    """Translate a JSON-LD document into triples.

    Args:
        document: A parsed JSON value.  A top-level array is walked
            as a node keyed by element index; a scalar yields no triples.
        base_uri: Base against which the root ``@id`` and relative
            reference ids are resolved.
        store: Store to populate.  A new one is created when omitted;
            pass a store in to query the result.

    Returns:
        The root subject as a :class:`NamedNode`.
    """
    if store is None:
        store = TripleStore()
    walker = _Translator(build_context(document), base_uri, store)
    root = named_node(root_subject_uri(document, base_uri))
    if isinstance(document, list):
        walker.add_triples(_indexed(document), root)
    elif isinstance(document, Mapping):
        walker.add_triples(document, root)
    else:
        logger.debug("Nothing to translate in %s document", type(document).__name__)
    return root


class _Translator:
    """Per-call translation state: context, base, target store, ids."""

    def __init__(self, context: dict[str, str], base_uri: str, store: TripleStore) -> None:
        self.context = context
        self.base_uri = base_uri
        self.store = store
        self.blank_nodes = BlankNodeIssuer()

    def add_triples(self, node: Mapping[str, Any], subject: NamedNode) -> None:
        self._add_types(node.get("@type"), subject)

        for key, value in node.items():
            if not isinstance(key, str) or key.startswith("@"):
                continue
            pred_uri = resolve_prefix(key, self.context)
            if not pred_uri:
                logger.debug("Skipping unresolvable key %r", key)
                continue
            self._add_value(subject, named_node(pred_uri), key, value)

    def _add_types(self, types: Any, subject: NamedNode) -> None:
        if not types:
            return
        for type_ in types if isinstance(types, list) else [types]:
            if not isinstance(type_, str):
                logger.debug("Skipping non-string @type %r", type_)
                continue
            type_uri = resolve_prefix(type_, self.context) or type_
            self.store.add(subject, _RDF_TYPE, named_node(type_uri))

    def _add_value(self, subject: NamedNode, pred: NamedNode, key: str, value: Any) -> None:
        shape = classify(value)
        if shape is ValueShape.ARRAY:
            for i, item in enumerate(value):
                self._add_item(subject, pred, key, item, classify(item), i)
        else:
            self._add_item(subject, pred, key, value, shape, None)

    def _add_item(
        self,
        subject: NamedNode,
        pred: NamedNode,
        key: str,
        value: Any,
        shape: ValueShape,
        index: Optional[int],
    ) -> None:
        if shape is ValueShape.REFERENCE:
            self.store.add(subject, pred, named_node(self._resolve_id(value["@id"])))
        elif shape is ValueShape.EMBEDDED or shape is ValueShape.ARRAY:
            blank = self.blank_nodes.issue(subject.uri, _last_segment(key), index)
            self.store.add(subject, pred, blank)
            self.add_triples(_indexed(value) if shape is ValueShape.ARRAY else value, blank)
        elif shape is ValueShape.SCALAR:
            self.store.add(subject, pred, value)
        else:
            raise AssertionError(f"Unhandled value shape: {shape}")

    def _resolve_id(self, node_id: Any) -> str:
        text = _id_text(node_id)
        return text if text.startswith("http") else self.base_uri + text


# -- Helpers ------------------------------------------------------------------


def _indexed(items: list) -> dict[str, Any]:
    """View an array as a node whose keys are the element indices."""
    return {str(i): item for i, item in enumerate(items)}


def _last_segment(key: str) -> str:
    return key.rsplit(":", 1)[-1]


def _id_text(node_id: Any) -> str:
    if not node_id:
        return ""
    return node_id if isinstance(node_id, str) else str(node_id)
