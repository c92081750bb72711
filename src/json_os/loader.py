"""
Document acquisition for json-os.

Turns JSON text or a remote URL into a parsed JSON-LD object plus the
base URI its relative identifiers resolve against.  Remote documents
are fetched through PyLD's document loader, so any loader configured
with :func:`pyld.jsonld.set_document_loader` is honoured.

Failures here are logged and reported as ``None``; nothing in this
module raises for bad input or network errors.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional
from urllib.parse import urldefrag, urljoin

from pyld import jsonld
from pyld.jsonld import JsonLdError

logger = logging.getLogger(__name__)

DocumentLoader = Callable[..., dict[str, Any]]


def parse_document(text: str) -> Optional[dict[str, Any]]:
    """Parse JSON-LD text into a node object, or ``None`` if it is invalid."""
    try:
        parsed = json.loads(text or "")
    except json.JSONDecodeError as exc:
        logger.error("Invalid JSON-LD: %s", exc)
        return None
    if not isinstance(parsed, dict):
        logger.error("Invalid JSON-LD: expected an object, got %s", type(parsed).__name__)
        return None
    return parsed


def document_base(url: str, page_url: Optional[str] = None) -> str:
    """Absolute form of *url* (resolved against *page_url*) without fragment."""
    absolute = urljoin(page_url, url) if page_url else url
    return urldefrag(absolute)[0]


def fetch_document(
    url: str,
    page_url: Optional[str] = None,
    document_loader: Optional[DocumentLoader] = None,
) -> Optional[tuple[dict[str, Any], str]]:
    """Fetch a remote JSON-LD document.

    Args:
        url: Location of the document, possibly relative to *page_url*.
        page_url: URL of the embedding page, used to resolve *url*.
        document_loader: A PyLD-style loader ``(url, options) -> dict``.
            Defaults to :func:`pyld.jsonld.get_document_loader`.

    Returns:
        ``(document, base_uri)`` or ``None`` when the fetch fails.
    """
    target = document_base(url, page_url)
    loader = document_loader or jsonld.get_document_loader()
    try:
        remote = loader(target, {})
    except JsonLdError as exc:
        logger.error("Failed to fetch %s: %s", target, exc)
        return None

    document = remote.get("document")
    if isinstance(document, str):
        document = parse_document(document)
    elif not isinstance(document, dict):
        logger.error("Failed to fetch %s: document is not a JSON object", target)
        document = None
    if document is None:
        return None

    base = document_base(remote.get("documentUrl") or target)
    logger.debug("Fetched %s (base %s)", target, base)
    return document, base
