#!/usr/bin/env python3

import logging
from typing import Optional

from ....clients.document_client import DocumentLoader
from ....models.models import ResolverConfig
from .schema_document import ResolutionSession, SchemaDocument
from .url_normalizer import normalize_location

logger = logging.getLogger(__name__)


class SchemaGraphResolver:
    """
    Resolves a root WSDL/XSD document and everything it imports or includes
    into a single SchemaDocument graph.

    Each call to resolve() is an independent resolution run with its own
    loaded-location set, so one resolver can be reused for several roots.
    """

    def __init__(self, config: Optional[ResolverConfig] = None, loader: Optional[DocumentLoader] = None):
        self.config = config if config else ResolverConfig()
        self.loader = loader

    def resolve(self, root_location: str) -> SchemaDocument:
        """
        Load the schema graph rooted at root_location.

        Args:
            root_location: Local path, file:// URL or http(s):// URL of the root document

        Returns:
            Root SchemaDocument of the graph

        Raises:
            LoadError: If any document of the graph cannot be loaded
            MalformedReferenceError: If a reference cannot be resolved
        """
        location = normalize_location(root_location)
        session = ResolutionSession(self.config, self.loader)
        session.claim(location)

        logger.info(f"Resolving schema graph from {location}", extra={"location": location})
        root = SchemaDocument(session, location)

        logger.info(
            f"Resolved schema graph from {location}: {len(session.loaded_urls)} documents loaded",
            extra={"location": location},
        )
        return root


def resolve_schema_graph(root_location: str, config: Optional[ResolverConfig] = None) -> SchemaDocument:
    """
    Convenience function to resolve a schema graph with a fresh resolver.

    Args:
        root_location: Location of the root WSDL/XSD document
        config: Optional network configuration (proxy, timeout, TLS)

    Returns:
        Root SchemaDocument of the graph
    """
    return SchemaGraphResolver(config).resolve(root_location)
