#!/usr/bin/env python3
"""Tests for schemaLocation resolution."""

import pytest

from schema_graph.core.exceptions import MalformedReferenceError
from schema_graph.services.domain.schema.url_normalizer import (
    normalize_location,
    resolve_reference_url,
)

BASE = "http://host/x/y/z.xsd"


class TestResolveReferenceUrl:
    """Test suite for resolve_reference_url"""

    def test_sibling_reference(self):
        """Test that a plain file name resolves next to the base document."""
        assert resolve_reference_url("c.xsd", BASE) == "http://host/x/y/c.xsd"

    def test_parent_reference(self):
        """Test that ../ removes one directory from the base."""
        assert resolve_reference_url("../a/b.xsd", BASE) == "http://host/x/a/b.xsd"

    def test_multiple_parent_segments(self):
        """Test that each ../ removes one more directory."""
        assert resolve_reference_url("../../d.xsd", BASE) == "http://host/d.xsd"

    def test_absolute_reference_unchanged(self):
        """Test that a reference containing // is returned as-is."""
        assert resolve_reference_url("http://other/d.xsd", BASE) == "http://other/d.xsd"

    def test_https_scheme_preserved(self):
        """Test that the base scheme survives ../ collapsing."""
        result = resolve_reference_url("../common/types.xsd", "https://example.org/ws/v1/service.wsdl")
        assert result == "https://example.org/ws/common/types.xsd"

    def test_current_directory_segment_dropped(self):
        """Test that ./ segments are removed."""
        assert resolve_reference_url("./sub/e.xsd", BASE) == "http://host/x/y/sub/e.xsd"

    def test_root_relative_reference(self):
        """Test that a reference starting with / keeps only the scheme and host of the base."""
        assert resolve_reference_url("/schemas/f.xsd", BASE) == "http://host/schemas/f.xsd"

    def test_query_string_on_reference_preserved(self):
        """Test that a ?xsd=N style reference keeps its query string."""
        result = resolve_reference_url("service?xsd=1", "http://host/ws/service?wsdl")
        assert result == "http://host/ws/service?xsd=1"

    def test_too_many_parent_segments_raises(self):
        """Test that climbing above the host is reported instead of guessed."""
        with pytest.raises(MalformedReferenceError) as exc_info:
            resolve_reference_url("../../../g.xsd", BASE)

        assert exc_info.value.reference == "../../../g.xsd"
        assert exc_info.value.base == BASE

    def test_absolute_local_path(self):
        """Test resolution against an absolute filesystem path."""
        assert resolve_reference_url("../common.xsd", "/srv/schemas/main/root.xsd") == "/srv/schemas/common.xsd"

    def test_absolute_local_path_above_root_raises(self):
        """Test that climbing above / raises."""
        with pytest.raises(MalformedReferenceError):
            resolve_reference_url("../../x.xsd", "/root.xsd")

    def test_relative_local_path(self):
        """Test that relative bases stay relative."""
        assert resolve_reference_url("common.xsd", "schemas/root.xsd") == "schemas/common.xsd"
        assert resolve_reference_url("common.xsd", "root.xsd") == "common.xsd"

    def test_relative_local_path_may_climb_above_working_directory(self):
        """Test that surplus ../ on a relative base is kept."""
        assert resolve_reference_url("../shared/x.xsd", "root.xsd") == "../shared/x.xsd"

    def test_file_url(self):
        """Test resolution against a file:// URL."""
        result = resolve_reference_url("../b.xsd", "file:///tmp/schemas/a/root.xsd")
        assert result == "file:///tmp/schemas/b.xsd"


class TestNormalizeLocation:
    """Test suite for normalize_location"""

    def test_collapses_dot_segments(self):
        """Test that ./ and ../ in a root location are collapsed."""
        assert normalize_location("./schemas/../root.xsd") == "root.xsd"

    def test_url_unchanged_when_canonical(self):
        """Test that canonical URLs pass through."""
        assert normalize_location("http://host/x/y/z.xsd") == "http://host/x/y/z.xsd"

    def test_url_without_path_unchanged(self):
        """Test that a bare host keeps its spelling so absolute references still match."""
        assert normalize_location("http://host") == "http://host"
        assert normalize_location("http://host?wsdl") == "http://host?wsdl"
        assert normalize_location("http://host/") == "http://host/"

    def test_reference_against_bare_host(self):
        """Test that a relative reference against a bare host gets a root slash."""
        assert resolve_reference_url("c.xsd", "http://host") == "http://host/c.xsd"

    def test_query_preserved(self):
        """Test that a ?wsdl suffix is kept."""
        assert normalize_location("http://host/ws/./service?wsdl") == "http://host/ws/service?wsdl"

    def test_matches_resolved_reference(self):
        """Test that a root and a reference to it share one spelling."""
        root = normalize_location("schemas/./root.xsd")
        assert resolve_reference_url("root.xsd", "schemas/common.xsd") == root
