"""
JsonOs — load a JSON-LD document into a queryable triple store.

Combines resource limits, document loading and translation.  The
document's ``@view`` is handed back untouched for whatever renders it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from json_os.limits import DEFAULT_RESOURCE_LIMITS, enforce_resource_limits
from json_os.loader import DocumentLoader, fetch_document, parse_document
from json_os.store import TripleStore
from json_os.terms import NamedNode, literal, named_node, namespace
from json_os.translator import resolve_prefix, translate

logger = logging.getLogger(__name__)


@dataclass
class ViewResult:
    """A translated document: root subject, its store and the ``@view``."""

    subject: NamedNode
    store: TripleStore
    view: Any = None


class JsonOs:
    """JSON-LD → triple store loader with resource limit enforcement."""

    def __init__(
        self,
        resource_limits: Optional[dict[str, int]] = None,
        default_base: str = "",
    ):
        self._limits = {**DEFAULT_RESOURCE_LIMITS, **(resource_limits or {})}
        self._default_base = default_base

    # ── Core Operations ──────────────────────────────────────────

    def load(
        self, document: dict[str, Any] | str, base_uri: Optional[str] = None,
    ) -> Optional[ViewResult]:
        """Translate a parsed document or JSON text.

        Returns ``None`` (after logging) when the text is not valid
        JSON-LD, is not a JSON object, or would translate into more
        than the configured limits allow.
        """
        if isinstance(document, str):
            parsed = parse_document(document)
            if parsed is None:
                return None
            document = parsed

        try:
            enforce_resource_limits(document, self._limits)
        except (TypeError, ValueError) as exc:
            logger.error("Rejected JSON-LD document: %s", exc)
            return None

        base = self._default_base if base_uri is None else base_uri
        store = TripleStore()
        subject = translate(document, base, store)
        logger.debug("Translated %s into %d triples", subject.uri, len(store))

        view = document.get("@view")
        if not view:
            logger.warning("No @view in JSON-LD")
            view = None
        return ViewResult(subject=subject, store=store, view=view)

    def load_url(
        self,
        url: str,
        page_url: Optional[str] = None,
        document_loader: Optional[DocumentLoader] = None,
    ) -> Optional[ViewResult]:
        """Fetch a remote document and load it against its own base."""
        fetched = fetch_document(url, page_url, document_loader)
        if fetched is None:
            return None
        document, base = fetched
        return self.load(document, base)

    # ── Term & Translation Helpers ───────────────────────────────

    translate = staticmethod(translate)
    resolve_prefix = staticmethod(resolve_prefix)
    named_node = staticmethod(named_node)
    literal = staticmethod(literal)
    namespace = staticmethod(namespace)
