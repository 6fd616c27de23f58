"""Unit tests for the symbolic enumeration tables."""

from __future__ import annotations

import pytest

from sphinx_bridge.application.search import GroupByFunction, MatchMode, SortMode, resolve_enum
from sphinx_bridge.kernel.errors import UnknownEnumValueError


class TestTables:
    def test_match_mode_constants(self) -> None:
        assert [m.value for m in (MatchMode.ALL, MatchMode.ANY, MatchMode.BOOLEAN, MatchMode.EXTENDED)] == [0, 1, 3, 4]

    def test_sort_mode_constants(self) -> None:
        assert SortMode.RELEVANCE == 0
        assert SortMode.ATTR_DESC == 1
        assert SortMode.EXPR == 5

    def test_group_by_constants(self) -> None:
        assert [f.value for f in GroupByFunction] == [0, 1, 2, 3, 4, 5]


class TestResolveEnum:
    @pytest.mark.parametrize("name", ["any", "ANY", "Any"])
    def test_case_insensitive_name(self, name: str) -> None:
        assert resolve_enum(MatchMode, name, "mode") is MatchMode.ANY

    def test_member_passes_through(self) -> None:
        assert resolve_enum(SortMode, SortMode.ATTR_ASC, "sort_mode") is SortMode.ATTR_ASC

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownEnumValueError) as exc_info:
            resolve_enum(GroupByFunction, "fortnight", "group_by")
        assert exc_info.value.value == "fortnight"
        assert exc_info.value.field == "group_by"

    def test_member_of_other_table_rejected(self) -> None:
        with pytest.raises(UnknownEnumValueError):
            resolve_enum(MatchMode, SortMode.EXTENDED, "mode")

    def test_raw_int_rejected(self) -> None:
        with pytest.raises(UnknownEnumValueError):
            resolve_enum(MatchMode, 1, "mode")
