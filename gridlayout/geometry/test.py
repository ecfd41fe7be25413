"""Unit tests for grid geometry primitives."""

import pytest

from .lib import Rect, bounding_extent, intervals_overlap, rect_within, rects_intersect


class TestRect:
    """Tests for the Rect model."""

    @pytest.mark.unit
    def test_edges(self):
        rect = Rect(x=2, y=3, width=4, height=5)
        assert rect.right == 6
        assert rect.bottom == 8

    @pytest.mark.unit
    def test_negative_and_zero_are_representable(self):
        rect = Rect(x=-1, y=-2, width=0, height=3)
        assert rect.x == -1
        assert rect.is_empty

    @pytest.mark.unit
    def test_dump_round_trip(self):
        rect = Rect(x=0, y=1, width=12, height=6)
        assert Rect.model_validate(rect.model_dump()) == rect


class TestIntervalsOverlap:
    """Tests for half-open interval overlap."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ((0, 3), (2, 5), True),
            ((0, 3), (3, 5), False),
            ((3, 5), (0, 3), False),
            ((0, 10), (4, 5), True),
            ((0, 0), (0, 5), False),
        ],
    )
    def test_overlap(self, a, b, expected):
        assert intervals_overlap(*a, *b) is expected


class TestRectsIntersect:
    """Tests for axis-aligned rectangle intersection."""

    @pytest.mark.unit
    def test_overlapping(self):
        a = Rect(x=0, y=1, width=6, height=4)
        b = Rect(x=4, y=1, width=8, height=4)
        assert rects_intersect(a, b)
        assert rects_intersect(b, a)

    @pytest.mark.unit
    def test_edge_contact_is_not_intersection(self):
        header = Rect(x=0, y=0, width=12, height=1)
        main = Rect(x=0, y=1, width=12, height=6)
        assert not rects_intersect(header, main)

    @pytest.mark.unit
    def test_disjoint_on_one_axis(self):
        a = Rect(x=0, y=0, width=3, height=3)
        b = Rect(x=9, y=0, width=3, height=3)
        assert not rects_intersect(a, b)


class TestRectWithin:
    """Tests for grid bounds containment."""

    @pytest.mark.unit
    def test_inside(self):
        assert rect_within(Rect(x=0, y=7, width=12, height=1), 12, 8)

    @pytest.mark.unit
    def test_exceeds_columns(self):
        assert not rect_within(Rect(x=10, y=5, width=10, height=1), 12, 8)

    @pytest.mark.unit
    def test_negative_origin(self):
        assert not rect_within(Rect(x=-1, y=0, width=2, height=1), 12, 8)


class TestBoundingExtent:
    """Tests for bounding extent aggregation."""

    @pytest.mark.unit
    def test_empty(self):
        assert bounding_extent([]) == (0, 0)

    @pytest.mark.unit
    def test_multiple(self):
        rects = [
            Rect(x=0, y=0, width=3, height=3),
            Rect(x=9, y=17, width=3, height=3),
        ]
        assert bounding_extent(rects) == (12, 20)
