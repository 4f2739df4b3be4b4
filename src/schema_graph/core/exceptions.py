#!/usr/bin/env python3
"""Exception types raised while resolving a schema graph."""


class SchemaResolutionError(Exception):
    """Base class for every failure that aborts a resolution run."""
    pass


class LoadError(SchemaResolutionError):
    """
    Exception raised when a schema document cannot be loaded.

    Used for:
    - Unreachable locations (missing file, connection failure, HTTP error status)
    - Content that is not well-formed XML
    - XML rejected by defusedxml (entity expansion, external entities)
    """

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Unable to load XML from {location}: {reason}")


class MalformedReferenceError(SchemaResolutionError):
    """Raised when an import/include reference cannot be resolved against its base."""

    def __init__(self, reference: str, base: str):
        self.reference = reference
        self.base = base
        super().__init__(
            f"Reference {reference!r} climbs above the root of {base!r}"
        )
