"""Tests for localeroute.routing.params — kinds and value formatting."""

import re

import pytest

from localeroute.errors import InvalidParameterError
from localeroute.routing.params import (
    DYNAMIC_PATTERN,
    SegmentKind,
    format_segments,
    format_value,
)


class TestSegmentKind:
    def test_catch_all_kinds(self) -> None:
        assert SegmentKind.CATCH_ALL.is_catch_all
        assert SegmentKind.OPTIONAL_CATCH_ALL.is_catch_all
        assert not SegmentKind.DYNAMIC.is_catch_all
        assert not SegmentKind.LITERAL.is_catch_all

    def test_dynamic_regex_excludes_slash(self) -> None:
        assert re.fullmatch(DYNAMIC_PATTERN, "my-post")
        assert not re.fullmatch(DYNAMIC_PATTERN, "a/b")
        assert not re.fullmatch(DYNAMIC_PATTERN, "")


class TestFormatValue:
    def test_string(self) -> None:
        assert format_value("slug", "hello") == "hello"

    def test_int(self) -> None:
        assert format_value("id", 42) == "42"

    def test_rejects_bool(self) -> None:
        with pytest.raises(InvalidParameterError):
            format_value("flag", True)

    def test_rejects_empty(self) -> None:
        with pytest.raises(InvalidParameterError, match="empty"):
            format_value("slug", "")

    def test_rejects_slash(self) -> None:
        with pytest.raises(InvalidParameterError, match="'/'"):
            format_value("slug", "a/b")

    def test_rejects_other_types(self) -> None:
        with pytest.raises(InvalidParameterError):
            format_value("slug", 1.5)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["a?b", "x#y", "?", "#top"])
    def test_rejects_query_and_fragment_markers(self, value: str) -> None:
        with pytest.raises(InvalidParameterError, match="value contains"):
            format_value("slug", value)


class TestFormatSegments:
    def test_sequence(self) -> None:
        assert format_segments("parts", ["a", "b", 3]) == ("a", "b", "3")

    def test_tuple(self) -> None:
        assert format_segments("parts", ("a",)) == ("a",)

    def test_string_is_split(self) -> None:
        assert format_segments("parts", "a/b//c/") == ("a", "b", "c")

    def test_int(self) -> None:
        assert format_segments("parts", 7) == ("7",)

    def test_empty_sequence(self) -> None:
        assert format_segments("parts", []) == ()

    def test_rejects_item_with_slash(self) -> None:
        with pytest.raises(InvalidParameterError):
            format_segments("parts", ["a/b"])

    def test_rejects_query_marker_in_item(self) -> None:
        with pytest.raises(InvalidParameterError):
            format_segments("parts", ["a", "b?c"])

    def test_rejects_fragment_marker_in_split_string(self) -> None:
        with pytest.raises(InvalidParameterError):
            format_segments("parts", "a/b#c")

    def test_rejects_non_sequence(self) -> None:
        with pytest.raises(InvalidParameterError):
            format_segments("parts", {"a": 1})  # type: ignore[arg-type]
