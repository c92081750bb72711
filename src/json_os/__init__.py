"""
json-os: JSON-LD documents as queryable triple stores

Translates a JSON-LD document into an in-memory graph of
subject–predicate–object statements that view renderers can query
for properties and types without re-reading the document.
"""

__version__ = "0.1.0"

from json_os.processor import JsonOs, ViewResult
from json_os.terms import (
    RDF,
    RDF_NS,
    RDF_TYPE,
    SCHEMA,
    SCHEMA_HTTP,
    SCHEMA_HTTPS,
    BlankNode,
    Literal,
    NamedNode,
    Namespace,
    literal,
    named_node,
    namespace,
    normalize_uri,
    schema_org_variants,
)
from json_os.store import Triple, TripleStore, create_store
from json_os.translator import (
    DEFAULT_ROOT_FRAGMENT,
    BlankNodeIssuer,
    ValueShape,
    build_context,
    classify,
    resolve_prefix,
    root_subject_uri,
    translate,
)
from json_os.limits import (
    DEFAULT_RESOURCE_LIMITS,
    DocumentMeasure,
    enforce_resource_limits,
    measure_document,
)
from json_os.loader import document_base, fetch_document, parse_document

__all__ = [
    "__version__",
    # Processor
    "JsonOs",
    "ViewResult",
    # Term model
    "RDF",
    "RDF_NS",
    "RDF_TYPE",
    "SCHEMA",
    "SCHEMA_HTTP",
    "SCHEMA_HTTPS",
    "BlankNode",
    "Literal",
    "NamedNode",
    "Namespace",
    "literal",
    "named_node",
    "namespace",
    "normalize_uri",
    "schema_org_variants",
    # Triple store
    "Triple",
    "TripleStore",
    "create_store",
    # Translation
    "DEFAULT_ROOT_FRAGMENT",
    "BlankNodeIssuer",
    "ValueShape",
    "build_context",
    "classify",
    "resolve_prefix",
    "root_subject_uri",
    "translate",
    # Limits
    "DEFAULT_RESOURCE_LIMITS",
    "DocumentMeasure",
    "enforce_resource_limits",
    "measure_document",
    # Loading
    "document_base",
    "fetch_document",
    "parse_document",
]
