"""Unit tests for PaginatorState and OrderBy."""

from __future__ import annotations

import dataclasses

import pytest

from simple_pagination.application.pagination import (
    DEFAULT_PER_PAGE,
    OrderBy,
    PaginatorState,
    SortDirection,
)


class TestOrderBy:
    def test_asc_factory(self) -> None:
        assert OrderBy.asc("title") == (SortDirection.ASC, "title")

    def test_desc_factory(self) -> None:
        assert OrderBy.desc("title") == (SortDirection.DESC, "title")

    def test_unpacks_as_pair(self) -> None:
        direction, field = OrderBy.desc("id")
        assert direction is SortDirection.DESC
        assert field == "id"

    def test_direction_values(self) -> None:
        assert SortDirection.ASC.value == "asc"
        assert SortDirection.DESC == "desc"


class TestPaginatorStateDefaults:
    def test_defaults(self) -> None:
        state = PaginatorState()
        assert state.order_by == OrderBy.asc("id")
        assert state.filters == {}
        assert state.page == 1
        assert state.page_max == 1
        assert state.per_page_nb is None
        assert state.per_page_items == (5, 10, 20, 0)
        assert state.data == ()

    def test_frozen(self) -> None:
        state = PaginatorState()
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.page = 2  # type: ignore[misc]

    def test_filters_not_shared_between_instances(self) -> None:
        assert PaginatorState().filters is not PaginatorState().filters


class TestEffectivePerPage:
    def test_uses_chosen_value(self) -> None:
        assert PaginatorState(per_page_nb=25).effective_per_page_nb == 25

    def test_zero_is_a_choice(self) -> None:
        assert PaginatorState(per_page_nb=0).effective_per_page_nb == 0

    def test_falls_back_to_first_item(self) -> None:
        assert PaginatorState(per_page_items=(25, 50)).effective_per_page_nb == 25

    def test_falls_back_to_ten_without_items(self) -> None:
        state = PaginatorState(per_page_items=())
        assert state.effective_per_page_nb == DEFAULT_PER_PAGE == 10


class TestFiltersAndNavigation:
    def test_with_filter_fields(self) -> None:
        state = PaginatorState.with_filter_fields("title", "body", page=2)
        assert list(state.filters.items()) == [("title", ""), ("body", "")]
        assert state.page == 2

    def test_active_filters_drop_empty_values(self) -> None:
        state = PaginatorState(filters={"title": "", "body": "x"})
        assert state.active_filters == {"body": "x"}
        assert state.filters == {"title": "", "body": "x"}

    def test_has_previous_and_next(self) -> None:
        state = PaginatorState(page=2, page_max=3)
        assert state.has_previous
        assert state.has_next

    def test_single_page_has_neither(self) -> None:
        state = PaginatorState()
        assert not state.has_previous
        assert not state.has_next

    def test_replace_returns_new_instance(self) -> None:
        state = PaginatorState()
        other = state.replace(page=4)
        assert other.page == 4
        assert state.page == 1


class TestSnapshotIsolation:
    def test_source_dict_changes_do_not_leak(self) -> None:
        source = {"title": "a"}
        state = PaginatorState(filters=source)
        source["title"] = "b"
        source["body"] = "c"
        assert state.filters == {"title": "a"}

    def test_filters_are_read_only(self) -> None:
        state = PaginatorState(filters={"title": "a"})
        with pytest.raises(TypeError):
            state.filters["title"] = "b"  # type: ignore[index]

    def test_replace_does_not_share_filters(self) -> None:
        state = PaginatorState(filters={"title": "a"})
        assert state.replace(page=2).filters is not state.filters

    def test_per_page_items_stored_as_tuple(self) -> None:
        assert PaginatorState(per_page_items=[5, 0]).per_page_items == (5, 0)  # type: ignore[arg-type]

    def test_hashable(self) -> None:
        assert hash(PaginatorState()) == hash(PaginatorState())

    def test_equal_states_hash_equal_regardless_of_filter_order(self) -> None:
        a = PaginatorState(filters={"title": "x", "body": "y"})
        b = PaginatorState(filters={"body": "y", "title": "x"})
        assert a == b
        assert hash(a) == hash(b)

    def test_usable_as_set_member(self) -> None:
        assert len({PaginatorState(page=2), PaginatorState(page=2), PaginatorState(page=3)}) == 2
