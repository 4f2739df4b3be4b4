#!/usr/bin/env python3
"""
Schema Document Client

Fetches a single XML document from a local path, a file:// URL or an
http(s):// URL and parses it with defusedxml. Remote fetches go through a
requests session built from the resolver configuration.

This client is pure infrastructure: it knows nothing about imports,
includes or types.
"""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlsplit
from xml.etree.ElementTree import Element

import requests
# Use defusedxml for secure XML parsing (prevents XXE attacks)
import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from ..core.exceptions import LoadError
from ..models.models import ResolverConfig
from .http_client import create_session, fetch_bytes

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ("http", "https")


class DocumentLoader:
    """Loads and parses XML documents for a resolution run."""

    def __init__(self, config: Optional[ResolverConfig] = None):
        self.config = config if config else ResolverConfig()

    def read_bytes(self, location: str) -> bytes:
        """
        Read the raw content of a document.

        Raises:
            LoadError: If the location is unreachable
        """
        scheme = urlsplit(location).scheme.lower()

        if scheme in REMOTE_SCHEMES:
            # Network context is scoped to this single load
            with create_session(self.config) as session:
                try:
                    return fetch_bytes(session, location, self.config.timeout)
                except requests.RequestException as e:
                    logger.error(f"Error fetching {location}: {e}", extra={"location": location})
                    raise LoadError(location, str(e)) from e

        if scheme == "file":
            path = Path(unquote(urlsplit(location).path))
        elif len(scheme) > 1:
            raise LoadError(location, f"unsupported URL scheme '{scheme}'")
        else:
            path = Path(location)

        try:
            return path.read_bytes()
        except OSError as e:
            logger.error(f"Error reading {path}: {e}", extra={"location": location})
            raise LoadError(location, e.strerror or str(e)) from e

    def load(self, location: str) -> Element:
        """
        Load and parse the document at location.

        Args:
            location: Local path, file:// URL or http(s):// URL

        Returns:
            Root element of the parsed document

        Raises:
            LoadError: If the document cannot be read or is not well-formed XML
        """
        content = self.read_bytes(location)

        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            logger.error(f"Failed to parse XML from {location}: {e}", extra={"location": location})
            raise LoadError(location, f"not well-formed XML ({e})") from e
        except DefusedXmlException as e:
            logger.error(f"Rejected unsafe XML from {location}: {e}", extra={"location": location})
            raise LoadError(location, f"unsafe XML rejected ({e})") from e

        logger.debug(f"Loaded document {location}", extra={"location": location})
        return root
