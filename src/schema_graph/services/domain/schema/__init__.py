"""
Schema Graph Domain

Handles WSDL/XSD schema graph operations:
- Reference resolution (relative and ../ schema locations)
- Graph construction (imports and includes, cycle suppression)
- Type lookup across the whole graph
"""

from .resolver import SchemaGraphResolver, resolve_schema_graph
from .schema_document import ResolutionSession, SchemaDocument
from .url_normalizer import normalize_location, resolve_reference_url

__all__ = [
    # Resolution
    "SchemaGraphResolver",
    "resolve_schema_graph",
    # Graph
    "ResolutionSession",
    "SchemaDocument",
    # URLs
    "normalize_location",
    "resolve_reference_url",
]
