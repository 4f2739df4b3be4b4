#!/usr/bin/env python3
"""
Schema documents and the graph they form through imports and includes.

A SchemaDocument is one loaded WSDL/XSD document plus the documents it
references. Constructing the root document loads the whole graph: every
wsdl:import, xs:import and xs:include is followed recursively, and a
ResolutionSession shared by all constructions of the run makes sure each
location is loaded at most once, which also breaks import cycles.
"""

import logging
import threading
from typing import Iterator, Optional
from xml.etree.ElementTree import Element

from ....clients.document_client import DocumentLoader
from ....models.models import ResolverConfig
from .url_normalizer import resolve_reference_url

logger = logging.getLogger(__name__)

# XSD namespace
XS_NS = "http://www.w3.org/2001/XMLSchema"
XS = f"{{{XS_NS}}}"

# WSDL 1.1 namespace
WSDL_NS = "http://schemas.xmlsoap.org/wsdl/"
WSDL = f"{{{WSDL_NS}}}"

# Element tag -> attribute holding the referenced location.
# A reference can either be
# - an import from another namespace: http://www.w3.org/TR/xmlschema-1/#composition-schemaImport
# - an include within the same namespace: http://www.w3.org/TR/xmlschema-1/#compound-schema
REFERENCE_ATTRIBUTES = {
    f"{WSDL}import": "location",
    f"{XS}import": "schemaLocation",
    f"{XS}include": "schemaLocation",
}

TYPE_TAGS = (f"{XS}simpleType", f"{XS}complexType")


class ResolutionSession:
    """
    State shared by every document construction of one resolution run.

    Tracks the locations that have begun loading so that a reference back to
    an ancestor or to an already loaded sibling is skipped instead of loaded
    again. Sessions are independent of each other.
    """

    def __init__(self, config: Optional[ResolverConfig] = None, loader: Optional[DocumentLoader] = None):
        self.config = config if config else ResolverConfig()
        self.loader = loader if loader else DocumentLoader(self.config)
        # Insertion-ordered set of claimed locations
        self._loaded_urls: dict[str, None] = {}
        self._lock = threading.Lock()

    @property
    def loaded_urls(self) -> tuple[str, ...]:
        """Locations in the order they started loading."""
        with self._lock:
            return tuple(self._loaded_urls)

    def is_loaded(self, location: str) -> bool:
        with self._lock:
            return location in self._loaded_urls

    def claim(self, location: str) -> bool:
        """Register location as loading.

        Check and insert happen under one lock so that concurrent loads of
        sibling references cannot both claim the same location.

        Returns:
            True if the caller should load the location, False if it was
            already claimed in this run
        """
        with self._lock:
            if location in self._loaded_urls:
                return False
            self._loaded_urls[location] = None
            return True


class SchemaDocument:
    """
    A loaded schema document and the schema documents it references.

    The location must already be claimed in the session (see
    ResolutionSession.claim); references found in the document are claimed
    and loaded recursively during construction.
    """

    def __init__(self, session: ResolutionSession, location: str):
        self._location = location
        self._element = session.loader.load(location)

        references = []
        for reference_location in self._reference_locations():
            reference_url = resolve_reference_url(reference_location, location)

            if not session.claim(reference_url):
                logger.debug(
                    f"Skipping {reference_url} referenced from {location}: already loaded",
                    extra={"location": reference_url},
                )
                continue

            references.append(SchemaDocument(session, reference_url))

        self._references = tuple(references)

    def _reference_locations(self) -> Iterator[str]:
        """Yield import/include locations in document order."""
        for elem in self._element.iter():
            attribute = REFERENCE_ATTRIBUTES.get(elem.tag)
            if attribute:
                reference_location = elem.get(attribute)
                if reference_location:
                    yield reference_location

    def _find_local_type(self, name: str) -> Optional[Element]:
        """First simpleType/complexType named name in this document, in document order."""
        for elem in self._element.iter():
            if elem.tag in TYPE_TAGS and elem.get('name') == name:
                return elem
        return None

    @property
    def location(self) -> str:
        return self._location

    @property
    def element(self) -> Element:
        """Root element of the parsed document."""
        return self._element

    @property
    def references(self) -> tuple["SchemaDocument", ...]:
        return self._references

    @property
    def target_namespace(self) -> Optional[str]:
        """targetNamespace of the schema.

        For a WSDL document this is the namespace of the first embedded
        xs:schema that declares one.
        """
        namespace = self._element.get("targetNamespace")
        if self._element.tag == f"{XS}schema":
            return namespace

        for schema in self._element.iter(f"{XS}schema"):
            if schema.get("targetNamespace") is not None:
                return schema.get("targetNamespace")

        return namespace

    def iter_documents(self) -> Iterator["SchemaDocument"]:
        """Walk the graph depth-first, this document first."""
        yield self
        for reference in self._references:
            yield from reference.iter_documents()

    def find_type_document(self, name: str) -> Optional["SchemaDocument"]:
        """
        Find the document declaring a simple or complex type.

        The local document is searched first, then the referenced documents
        in declaration order.

        Returns:
            The declaring document, or None if no document declares the type
        """
        if self._find_local_type(name) is not None:
            return self

        for reference in self._references:
            document = reference.find_type_document(name)
            if document is not None:
                return document

        return None

    def find_type(self, name: str) -> Optional[Element]:
        """
        Parses the schema graph for a type with a specific name.

        Args:
            name: The name of the type

        Returns:
            The simpleType/complexType element if it is found, None otherwise
        """
        document = self.find_type_document(name)
        if document is None:
            return None
        return document._find_local_type(name)

    def __repr__(self) -> str:
        return f"SchemaDocument({self._location!r}, references={len(self._references)})"
