"""
Unit tests for operation visibility filtering.
"""

from oapiviews.engine.operations import filter_operations, is_private
from tests.helpers import make_operation


class TestIsPrivate:
    """Tests for is_private."""

    def test_tagged_private(self) -> None:
        """Test an operation with the private tag is private."""
        assert is_private(make_operation(tags=["a", "private"]), "private") is True

    def test_untagged(self) -> None:
        """Test operations without tags are public."""
        assert is_private(make_operation(), "private") is False

    def test_custom_tag(self) -> None:
        """Test the private tag name is configurable."""
        assert is_private(make_operation(tags=["hidden"]), "hidden") is True
        assert is_private(make_operation(tags=["private"]), "hidden") is False


class TestFilterOperations:
    """Tests for filter_operations."""

    def test_drop_private(self) -> None:
        """Test public filtering removes private operations."""
        path_item = {
            "get": make_operation(tags=["notifications"]),
            "put": make_operation(tags=["private"]),
        }
        result = filter_operations(path_item, keep_private=False, private_tag="private")
        assert result is not None
        assert list(result) == ["get"]

    def test_keep_private(self) -> None:
        """Test private filtering keeps only private operations."""
        path_item = {
            "get": make_operation(tags=["notifications"]),
            "put": make_operation(tags=["private"]),
        }
        result = filter_operations(path_item, keep_private=True, private_tag="private")
        assert result is not None
        assert list(result) == ["put"]

    def test_nothing_survives(self) -> None:
        """Test an item without surviving operations is dropped."""
        path_item = {"put": make_operation(tags=["private"])}
        assert filter_operations(path_item, keep_private=False, private_tag="private") is None

    def test_path_level_fields_follow_operations(self) -> None:
        """Test path-level fields are kept only alongside an operation."""
        parameters = [{"name": "id", "in": "path", "required": True}]
        path_item = {
            "parameters": parameters,
            "get": make_operation(tags=["integrations"]),
        }

        kept = filter_operations(path_item, keep_private=False, private_tag="private")
        assert kept is not None
        assert kept["parameters"] == parameters

        dropped = filter_operations(path_item, keep_private=True, private_tag="private")
        assert dropped is None
