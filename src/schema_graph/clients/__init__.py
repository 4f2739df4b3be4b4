"""
Client Layer

This package contains low-level client wrappers for fetching schema documents.
Clients handle communication with external systems but contain no business logic.

Modules:
- http_client: requests session factory (proxy, TLS, headers)
- document_client: local/remote XML document loader
"""

from .document_client import DocumentLoader
from .http_client import create_session, fetch_bytes

__all__ = [
    'DocumentLoader',
    'create_session',
    'fetch_bytes',
]
