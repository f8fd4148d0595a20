"""Tests for the adjacency listing format."""

from __future__ import annotations

from adjlist.graph import Entry
from adjlist.listing import format_vertex_line, parse_listing, parse_weight, split_group


class TestFormatVertexLine:
    def test_entries_always_have_weights(self) -> None:
        line = format_vertex_line("A", [Entry("B", 1), Entry("C", -4)])
        assert line == "A: (B, 1) (C, -4) "

    def test_vertex_without_entries(self) -> None:
        assert format_vertex_line("A", []) == "A: "


class TestParseWeight:
    def test_integers(self) -> None:
        assert parse_weight("12") == 12
        assert parse_weight("-3") == -3
        assert parse_weight("+7") == 7

    def test_malformed(self) -> None:
        assert parse_weight("x") is None
        assert parse_weight("1.5") is None
        assert parse_weight("") is None

    def test_missing(self) -> None:
        assert parse_weight(None) is None

    def test_32_bit_range(self) -> None:
        assert parse_weight("2147483647") == 2147483647
        assert parse_weight("-2147483648") == -2147483648
        assert parse_weight("2147483648") is None
        assert parse_weight("-2147483649") is None


class TestSplitGroup:
    def test_comma_and_spaces(self) -> None:
        assert split_group(" B ,  7 ") == ["B", "7"]

    def test_neighbor_only(self) -> None:
        assert split_group("B") == ["B"]

    def test_empty(self) -> None:
        assert split_group(" , ") == []


class TestParseListing:
    def test_collects_vertices_from_both_sides(self) -> None:
        listing = parse_listing(["A: (B, 1) (C, 2)"], directed=True, weighted=True)
        assert list(listing.vertices) == ["A", "B", "C"]
        assert list(listing.edges) == [("A", "B", 1), ("A", "C", 2)]

    def test_line_without_colon_is_a_vertex(self) -> None:
        listing = parse_listing(["A"], directed=True, weighted=True)
        assert list(listing.vertices) == ["A"]
        assert not listing.edges

    def test_blank_lines_are_skipped(self) -> None:
        listing = parse_listing(["A: ", "", "   ", "B: "], directed=True, weighted=False)
        assert list(listing.vertices) == ["A", "B"]

    def test_vertex_repeated_on_lines_is_collected_once(self) -> None:
        listing = parse_listing(["A: (B, 1)", "B: ", "A: "], True, True)
        assert list(listing.vertices) == ["A", "B"]

    def test_unweighted_ignores_weights(self) -> None:
        listing = parse_listing(["A: (B, 99)"], directed=True, weighted=False)
        assert list(listing.edges) == [("A", "B", None)]

    def test_malformed_weight_is_none(self) -> None:
        listing = parse_listing(["A: (B, heavy) (C)"], directed=True, weighted=True)
        assert list(listing.edges) == [("A", "B", None), ("A", "C", None)]

    def test_undirected_skips_exact_reverse(self) -> None:
        listing = parse_listing(["A: (B, 5)", "B: (A, 5)"], False, True)
        assert list(listing.edges) == [("A", "B", 5)]

    def test_undirected_keeps_reverse_with_other_weight(self) -> None:
        listing = parse_listing(["A: (B, 5)", "B: (A, 7)"], False, True)
        assert list(listing.edges) == [("A", "B", 5), ("B", "A", 7)]

    def test_directed_keeps_reverse(self) -> None:
        listing = parse_listing(["A: (B, 5)", "B: (A, 5)"], True, True)
        assert list(listing.edges) == [("A", "B", 5), ("B", "A", 5)]

    def test_identical_records_are_collected_once(self) -> None:
        listing = parse_listing(["A: (B, 1) (B, 1)"], directed=True, weighted=True)
        assert list(listing.edges) == [("A", "B", 1)]

    def test_text_outside_groups_is_ignored(self) -> None:
        listing = parse_listing(["A: junk (B, 1) more"], True, True)
        assert list(listing.vertices) == ["A", "B"]
        assert list(listing.edges) == [("A", "B", 1)]
