"""
Unit tests for property filtering.

Tests path normalization, only/except merge rules and recursive pick/omit
following AAA pattern.
"""

import copy
from typing import Any

import pytest

from request_serializer.config import FilterConfig
from request_serializer.filtering import (
    FilterSpec,
    apply_filter_spec,
    filter_data,
    normalize_paths,
    omit_paths,
    pick_paths,
    resolve_filter_spec,
)


class TestNormalizePaths:
    """Test path argument normalization."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, []),
            ("first", ["first"]),
            (["first", "last"], ["first", "last"]),
            (("first",), ["first"]),
            (["first", None, "", "last"], ["first", "last"]),
            ([1, 0, "first"], ["1", "first"]),
            ("", []),
        ],
    )
    def test_normalize_paths(self, value: Any, expected: list[str]) -> None:
        """Test absent, single, sequence and compacted values."""
        # Act & Assert
        assert normalize_paths(value) == expected


class TestResolveFilterSpec:
    """Test the only/except merge algorithm."""

    def test_no_criteria_is_noop(self, fake_request: Any) -> None:
        """Test that no criteria disables filtering."""
        # Act
        spec = resolve_filter_spec(fake_request, None)

        # Assert
        assert spec == FilterSpec()
        assert spec.is_noop

    def test_except_is_ordered_union(self, make_request: Any) -> None:
        """Test that except merges both sources without duplicates."""
        # Arrange
        request = make_request({"except": ["age", "email", "last"]})

        # Act
        spec = resolve_filter_spec(request, {"except": ["age", "email"]})

        # Assert
        assert spec.exclude == ("age", "email", "last")

    def test_only_intersection_keeps_option_order(self, make_request: Any) -> None:
        """Test that only from both sources intersects in option order."""
        # Arrange
        request = make_request({"only": ["email", "first"]})

        # Act
        spec = resolve_filter_spec(request, {"only": ["first", "last", "email"]})

        # Assert
        assert spec.only == ("first", "email")
        assert spec.only_enabled

    def test_empty_intersection_stays_enabled(self, make_request: Any) -> None:
        """Test that disjoint only sets still restrict the output."""
        # Act
        spec = resolve_filter_spec(make_request({"only": "last"}), {"only": "first"})

        # Assert
        assert spec.only == ()
        assert spec.only_enabled
        assert not spec.is_noop

    def test_only_from_query_alone(self, make_request: Any) -> None:
        """Test that query only applies when options have none."""
        # Act
        spec = resolve_filter_spec(make_request({"only": ["first"]}), {"except": "age"})

        # Assert
        assert spec == FilterSpec(only=("first",), only_enabled=True, exclude=("age",))

    def test_only_from_options_alone(self, fake_request: Any) -> None:
        """Test that option only applies when the query has none."""
        # Act
        spec = resolve_filter_spec(fake_request, {"only": "first"})

        # Assert
        assert spec == FilterSpec(only=("first",), only_enabled=True)

    def test_empty_values_do_not_enable_only(self, make_request: Any) -> None:
        """Test that empty strings are compacted away."""
        # Act
        spec = resolve_filter_spec(make_request({"only": ""}), {"only": [None, ""]})

        # Assert
        assert not spec.only_enabled

    def test_non_mapping_options_ignored(self, fake_request: Any) -> None:
        """Test that non-mapping options contribute no criteria."""
        # Act
        spec = resolve_filter_spec(fake_request, ["only", "first"])

        # Assert
        assert spec.is_noop

    def test_request_without_query(self) -> None:
        """Test that a request with no query contributes no criteria."""

        # Arrange
        class BareRequest:
            app = object()

            def get(self) -> None:
                return None

        # Act
        spec = resolve_filter_spec(BareRequest(), {"except": "age"})

        # Assert
        assert spec == FilterSpec(exclude=("age",))

    def test_query_getlist_is_used(self) -> None:
        """Test that multi-value query containers are read with getlist."""

        # Arrange
        class MultiQuery:
            def __init__(self, items: list[tuple[str, str]]) -> None:
                self._items = items

            def get(self, name: str) -> str | None:
                return next((value for key, value in self._items if key == name), None)

            def getlist(self, name: str) -> list[str]:
                return [value for key, value in self._items if key == name]

        class Request:
            app = object()
            query = MultiQuery([("only", "first"), ("only", "age")])

            def get(self) -> None:
                return None

        # Act
        spec = resolve_filter_spec(Request(), None)

        # Assert
        assert spec.only == ("first", "age")

    def test_query_getall_is_used(self) -> None:
        """Test that multidict containers exposing getall are read in full."""

        # Arrange
        class MultiDictProxy:
            def __init__(self, items: list[tuple[str, str]]) -> None:
                self._items = items

            def get(self, name: str, default: Any = None) -> Any:
                return next((value for key, value in self._items if key == name), default)

            def getall(self, name: str, default: Any = None) -> list[str]:
                values = [value for key, value in self._items if key == name]
                if not values and default is None:
                    raise KeyError(name)
                return values or default

        class Request:
            app = object()
            query = MultiDictProxy([("only", "first"), ("only", "age"), ("except", "a"), ("except", "b")])

            def get(self) -> None:
                return None

        # Act
        spec = resolve_filter_spec(Request(), None)
        missing = resolve_filter_spec(Request(), None, FilterConfig(only_param="fields", except_param="omit"))

        # Assert
        assert spec.only == ("first", "age")
        assert spec.exclude == ("a", "b")
        assert missing.is_noop

    def test_non_string_paths_are_stringified(self, person: dict) -> None:
        """Test that non-string path entries are matched as strings."""
        # Arrange
        record = {"1": "one", "first": "John", "last": "Doe"}

        # Act
        spec = resolve_filter_spec(None, {"only": [1, "first"], "except": [2, 0]})

        # Assert
        assert spec == FilterSpec(only=("1", "first"), only_enabled=True, exclude=("2",))
        assert apply_filter_spec(record, spec) == {"1": "one", "first": "John"}
        assert apply_filter_spec(person, spec) == {"first": "John"}

    def test_custom_param_names(self, make_request: Any) -> None:
        """Test that FilterConfig renames the query parameters."""
        # Arrange
        request = make_request({"fields": "first", "omit": "age", "only": "last"})
        config = FilterConfig(only_param="fields", except_param="omit")

        # Act
        spec = resolve_filter_spec(request, None, config)

        # Assert
        assert spec == FilterSpec(only=("first",), only_enabled=True, exclude=("age",))


class TestPickPaths:
    """Test allow-list application."""

    def test_pick_top_level(self, person: dict) -> None:
        """Test picking bare names."""
        # Act & Assert
        assert pick_paths(person, ["first"]) == {"first": "John"}

    def test_pick_missing_path_is_noop(self, person_with_address: dict) -> None:
        """Test that absent paths are neither errors nor insertions."""
        # Act
        result = pick_paths(person_with_address, ["first", "phone", "address.zip", "age.value"])

        # Assert
        assert result == {"first": "John"}

    def test_pick_nested_paths_compose(self, person_with_address: dict) -> None:
        """Test that paths sharing a prefix keep the union of sub-keys."""
        # Act
        result = pick_paths(person_with_address, ["address.city", "address.state"])

        # Assert
        assert result == {"address": {"city": "Sunnydale", "state": "California"}}
        assert result["address"] is not person_with_address["address"]

    @pytest.mark.parametrize("paths", [["address", "address.city"], ["address.city", "address"]])
    def test_bare_name_keeps_whole_value(self, person_with_address: dict, paths: list[str]) -> None:
        """Test that a bare name wins over a nested path in any order."""
        # Act
        result = pick_paths(person_with_address, paths)

        # Assert
        assert result == {"address": {"city": "Sunnydale", "state": "California"}}

    def test_pick_deep_paths(self) -> None:
        """Test recursion beyond two segments."""
        # Arrange
        record = {"a": {"b": {"c": 1, "d": 2}, "e": 3}, "f": 4}

        # Act
        result = pick_paths(record, ["a.b.c"])

        # Assert
        assert result == {"a": {"b": {"c": 1}}}

    def test_literal_dotted_key(self) -> None:
        """Test that a key containing the separator is matched as a key."""
        # Arrange
        record = {"a.b": 1, "a": {"b": 2}}

        # Act & Assert
        assert pick_paths(record, ["a.b"]) == {"a.b": 1}

    def test_pick_keeps_none_values(self) -> None:
        """Test that present keys holding None are retained."""
        # Act & Assert
        assert pick_paths({"a": None, "b": 1}, ["a"]) == {"a": None}

    def test_pick_non_mapping(self) -> None:
        """Test that non-mapping records pick to an empty dict."""
        # Act & Assert
        assert pick_paths(None, ["a"]) == {}
        assert pick_paths("text", ["a"]) == {}

    def test_custom_separator(self, person_with_address: dict) -> None:
        """Test picking with a different separator."""
        # Act & Assert
        assert pick_paths(person_with_address, ["address/city"], "/") == {"address": {"city": "Sunnydale"}}


class TestOmitPaths:
    """Test deny-list application."""

    def test_omit_top_level(self, person: dict) -> None:
        """Test omitting bare names."""
        # Act & Assert
        assert omit_paths(person, ["first", "last"]) == {"age": 42, "email": "jdoe@example.com"}

    def test_omit_nested_keeps_siblings(self, person_with_address: dict) -> None:
        """Test that a dotted path removes only the nested key."""
        # Arrange
        original = copy.deepcopy(person_with_address)

        # Act
        result = omit_paths(person_with_address, ["address.city"])

        # Assert
        assert result["address"] == {"state": "California"}
        assert person_with_address == original

    def test_omit_missing_path_is_noop(self, person: dict) -> None:
        """Test that absent paths leave the record unchanged."""
        # Act & Assert
        assert omit_paths(person, ["phone", "first.name", "address.city"]) == person

    def test_omit_deep_paths(self) -> None:
        """Test recursion beyond two segments."""
        # Arrange
        record = {"a": {"b": {"c": 1, "d": 2}}}

        # Act
        result = omit_paths(record, ["a.b.c"])

        # Assert
        assert result == {"a": {"b": {"d": 2}}}
        assert record == {"a": {"b": {"c": 1, "d": 2}}}

    def test_omit_non_mapping(self) -> None:
        """Test that non-mapping records omit to an empty dict."""
        # Act & Assert
        assert omit_paths([1, 2], ["a"]) == {}


class TestApplyFilterSpec:
    """Test application order and purity."""

    def test_noop_returns_same_object(self, person: dict) -> None:
        """Test that no criteria returns the item itself."""
        # Act & Assert
        assert apply_filter_spec(person, FilterSpec()) is person

    def test_except_wins_over_only(self, person: dict) -> None:
        """Test that a path in both sets is absent."""
        # Arrange
        spec = FilterSpec(only=("first", "last"), only_enabled=True, exclude=("last",))

        # Act & Assert
        assert apply_filter_spec(person, spec) == {"first": "John"}

    def test_filter_is_idempotent(self, person_with_address: dict) -> None:
        """Test that filtering twice equals filtering once."""
        # Arrange
        spec = FilterSpec(only=("first", "address.city", "age"), only_enabled=True, exclude=("age",))

        # Act
        once = apply_filter_spec(person_with_address, spec)
        twice = apply_filter_spec(once, spec)

        # Assert
        assert once == twice == {"first": "John", "address": {"city": "Sunnydale"}}

    def test_filter_does_not_mutate_input(self, person_with_address: dict) -> None:
        """Test that the transformed record is left untouched."""
        # Arrange
        original = copy.deepcopy(person_with_address)
        spec = FilterSpec(only=("address.city", "first"), only_enabled=True, exclude=("address.city",))

        # Act
        apply_filter_spec(person_with_address, spec)

        # Assert
        assert person_with_address == original


class TestFilterData:
    """Test the filter entry point."""

    def test_filter_data_merges_sources(self, make_request: Any, person: dict) -> None:
        """Test filtering with options and query together."""
        # Arrange
        request = make_request({"only": ["first", "last", "email"]})

        # Act
        result = filter_data(request, person, {"only": ["age", "email"]})

        # Assert
        assert result == {"email": "jdoe@example.com"}

    def test_filter_data_env_separator(
        self, monkeypatch: pytest.MonkeyPatch, fake_request: Any, person_with_address: dict
    ) -> None:
        """Test that the separator is read from the environment."""
        # Arrange
        monkeypatch.setenv("REQUEST_SERIALIZER_PATH_SEPARATOR", "__")

        # Act
        result = filter_data(fake_request, person_with_address, {"except": ["address__state", "email"]})

        # Assert
        assert result == {"first": "John", "last": "Doe", "age": 42, "address": {"city": "Sunnydale"}}
