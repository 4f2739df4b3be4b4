#!/usr/bin/env python3
"""
Resolution of import/include locations against the referencing document.

A schemaLocation is either absolute (contains '//') or relative to the
directory of the document that declares it. Relative references are joined
to that directory and '.'/'..' segments are collapsed so that the same
document always ends up under one spelling, which is what cycle detection
keys on.
"""

import logging
import posixpath
from urllib.parse import urlsplit

from ....core.exceptions import MalformedReferenceError

logger = logging.getLogger(__name__)


def _split_location(location: str) -> tuple[str, str]:
    """Split a location into ('scheme://authority', 'path?query').

    Local paths have an empty prefix. Single-letter schemes are treated as
    Windows drive letters, not URL schemes.
    """
    parts = urlsplit(location)
    if len(parts.scheme) > 1 and location[len(parts.scheme):].startswith("://"):
        prefix = f"{parts.scheme}://{parts.netloc}"
        return prefix, location[len(prefix):]
    return "", location


def _collapse_path(path: str, anchored: bool, reference: str, base: str) -> str:
    """Collapse '.' and '..' segments of path.

    Args:
        path: Path portion, without query string
        anchored: True when the path hangs off a root that cannot be climbed
            above (URL authority or filesystem root)
        reference: Original reference, for error reporting
        base: Base location, for error reporting

    Raises:
        MalformedReferenceError: If an anchored path climbs above its root
    """
    if not path:
        return path

    segments: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments and segments[-1] != "..":
                segments.pop()
            elif anchored:
                raise MalformedReferenceError(reference, base)
            else:
                # Relative local path: keep climbing from the working directory
                segments.append(segment)
            continue
        segments.append(segment)

    collapsed = "/".join(segments)
    if anchored:
        return "/" + collapsed
    return collapsed


def normalize_location(location: str) -> str:
    """Return the canonical spelling of a document location.

    Raises:
        MalformedReferenceError: If the location climbs above its root
    """
    prefix, rest = _split_location(location)
    path, sep, query = rest.partition("?")
    anchored = bool(prefix) or path.startswith("/")
    return prefix + _collapse_path(path, anchored, location, location) + sep + query


def resolve_reference_url(reference_url: str, base_url: str) -> str:
    """
    Resolve an import/include location against the document that contains it.

    Args:
        reference_url: Raw value of the location/schemaLocation attribute
        base_url: Location of the referencing document

    Returns:
        Absolute (or working-directory relative) location of the referenced document

    Raises:
        MalformedReferenceError: If the reference has more '../' segments than
            the base has directories

    Example:
        >>> resolve_reference_url("../a/b.xsd", "http://host/x/y/z.xsd")
        'http://host/x/a/b.xsd'
    """
    if "//" in reference_url:
        return reference_url

    prefix, base_rest = _split_location(base_url)
    base_path = base_rest.partition("?")[0]
    reference_path, sep, query = reference_url.partition("?")

    if reference_path.startswith("/"):
        joined = reference_path
    else:
        directory = posixpath.dirname(base_path)
        joined = f"{directory}/{reference_path}" if directory else reference_path

    anchored = bool(prefix) or joined.startswith("/")
    resolved = prefix + _collapse_path(joined, anchored, reference_url, base_url) + sep + query

    logger.debug(f"Resolved reference {reference_url} against {base_url} -> {resolved}")
    return resolved
