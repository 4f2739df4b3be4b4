"""Resolve interlinked WSDL/XSD documents into one queryable schema graph."""

from .core.exceptions import LoadError, MalformedReferenceError, SchemaResolutionError
from .models.models import ProxySettings, ResolverConfig
from .services.domain.schema import SchemaDocument, SchemaGraphResolver, resolve_schema_graph

__version__ = "0.1.0"

__all__ = [
    "LoadError",
    "MalformedReferenceError",
    "ProxySettings",
    "ResolverConfig",
    "SchemaDocument",
    "SchemaGraphResolver",
    "SchemaResolutionError",
    "resolve_schema_graph",
]
