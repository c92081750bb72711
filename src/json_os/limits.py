"""
Translation budgets for json-os.

Measures a parsed JSON-LD node the way :func:`json_os.translator.translate`
walks it, so a document can be refused before any triple is emitted:

  - *depth* counts the blank-node levels below the root (nested objects
    without ``@id`` and arrays inside arrays); references are leaves.
  - *triples* counts the statements translation would add.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_RESOURCE_LIMITS = {
    "max_graph_depth": 100,
    "max_triples": 100_000,
}


@dataclass
class DocumentMeasure:
    """Blank-node nesting depth and predicted triple count of a document."""

    depth: int = 0
    triples: int = 0


def measure_document(document: Mapping[str, Any]) -> DocumentMeasure:
    """Predict the shape of the graph *document* translates into.

    Iterative, so arbitrarily deep input cannot exhaust the stack.
    """
    result = DocumentMeasure()
    pending: list[tuple[Mapping[str, Any], int]] = [(document, 0)]
    while pending:
        node, depth = pending.pop()
        result.depth = max(result.depth, depth)
        result.triples += _type_count(node.get("@type"))
        for key, value in node.items():
            if not isinstance(key, str) or not key or key.startswith("@"):
                continue
            items = value if isinstance(value, list) else [value]
            result.triples += len(items)
            for item in items:
                child = _blank_child(item)
                if child is not None:
                    pending.append((child, depth + 1))
    return result


def enforce_resource_limits(
    document: Mapping[str, Any],
    limits: Optional[dict[str, int]] = None,
) -> DocumentMeasure:
    """Refuse a node object whose translation would exceed *limits*.

    Raises ``TypeError`` when *document* is not a JSON object and
    ``ValueError`` naming the first limit exceeded.
    """
    if not isinstance(document, Mapping):
        raise TypeError(f"Document must be a JSON object, got: {type(document).__name__}")
    resolved = {**DEFAULT_RESOURCE_LIMITS, **(limits or {})}
    measure = measure_document(document)
    if measure.depth > resolved["max_graph_depth"]:
        raise ValueError(
            f"Blank node depth {measure.depth} exceeds limit {resolved['max_graph_depth']}"
        )
    if measure.triples > resolved["max_triples"]:
        raise ValueError(
            f"Triple count {measure.triples} exceeds limit {resolved['max_triples']}"
        )
    return measure


# -- Helpers ------------------------------------------------------------------


def _type_count(types: Any) -> int:
    if not types:
        return 0
    if isinstance(types, list):
        return sum(1 for t in types if isinstance(t, str))
    return 1 if isinstance(types, str) else 0


def _blank_child(value: Any) -> Optional[Mapping[str, Any]]:
    """The node a value recurses into, or ``None`` for references and scalars."""
    if isinstance(value, list):
        return {str(i): item for i, item in enumerate(value)}
    if isinstance(value, Mapping) and not value.get("@id"):
        return value
    return None
