"""
Unit tests for the paginator.
"""

import logging

from cheatsheet_toolkit.layout import (
    LayoutResult,
    PageGeometry,
    PagePlan,
    boxes_for_page,
    find_position,
    page_count,
    paginate,
)


class TestPageCount:
    """Page count from vertical extent."""

    def test_count_when_empty_then_one_page(self, geometry):
        assert page_count([], geometry) == 1

    def test_count_when_single_box_on_first_page_then_one(self, geometry, make_box):
        assert page_count([make_box(x=40, y=40)], geometry) == 1

    def test_count_when_bottom_plus_margin_crosses_page_then_two(self, geometry, make_box):
        """Bottom 1100 + margin 40 needs a second page."""
        assert page_count([make_box(x=40, y=1000, height=100)], geometry) == 2

    def test_count_when_bottom_plus_margin_equals_page_then_one(self, geometry, make_box):
        """Bottom 1016 + margin 40 == 1056 exactly fills one page."""
        assert page_count([make_box(y=866, height=150)], geometry) == 1
        assert page_count([make_box(y=867, height=150)], geometry) == 2

    def test_count_when_custom_page_height_then_uses_it(self, make_box):
        geometry = PageGeometry(page_height=500, margin=20)

        assert page_count([make_box(y=900, height=150)], geometry) == 3


class TestBoxesForPage:
    """Page membership by interval overlap."""

    def test_membership_when_box_straddles_cut_then_on_both_pages(self, geometry, make_box):
        """A box from 1000 to 1100 crosses the 1056 cut."""
        box = make_box(y=1000, height=100)

        assert boxes_for_page([box], 0, geometry) == [box]
        assert boxes_for_page([box], 1, geometry) == [box]

    def test_membership_when_box_ends_at_cut_then_first_page_only(self, geometry, make_box):
        box = make_box(y=906, height=150)

        assert boxes_for_page([box], 0, geometry) == [box]
        assert boxes_for_page([box], 1, geometry) == []

    def test_membership_when_box_starts_at_cut_then_second_page_only(self, geometry, make_box):
        box = make_box(y=1056, height=150)

        assert boxes_for_page([box], 0, geometry) == []
        assert boxes_for_page([box], 1, geometry) == [box]

    def test_membership_when_many_boxes_then_canvas_order_kept(self, geometry, make_box):
        boxes = [make_box(y=500), make_box(y=40), make_box(y=2200), make_box(y=300)]

        assert boxes_for_page(boxes, 0, geometry) == [boxes[0], boxes[1], boxes[3]]
        assert boxes_for_page(boxes, 2, geometry) == [boxes[2]]

    def test_membership_when_page_past_content_then_empty(self, geometry, make_box):
        assert boxes_for_page([make_box(y=40)], 5, geometry) == []


class TestPaginate:
    """Full page plans."""

    def test_paginate_when_empty_then_single_empty_page(self, geometry):
        result = paginate([], geometry)

        assert isinstance(result, LayoutResult)
        assert result.page_count == 1
        assert result.pages[0].is_empty
        assert result.warnings == []

    def test_paginate_when_two_pages_then_offsets_and_relative_y(self, geometry, make_box):
        """Renderers subtract offset_y; absolute coordinates are untouched."""
        # Arrange
        top = make_box(x=40, y=40)
        lower = make_box(x=40, y=1100)

        # Act
        result = paginate([top, lower], geometry)

        # Assert
        assert result.page_count == 2
        first, second = result.pages
        assert first == PagePlan(index=0, boxes=(top,), offset_y=0)
        assert second.offset_y == 1056
        assert second.boxes == (lower,)
        assert second.relative_y(lower) == 44
        assert lower.y == 1100

    def test_paginate_when_box_past_right_margin_then_warning(self, geometry, make_box, caplog):
        """Overflowing boxes are kept and reported."""
        wide = make_box(x=40, y=40, width=800, box_id="wide")

        with caplog.at_level(logging.WARNING, logger="cheatsheet_toolkit.layout.paginator"):
            result = paginate([wide], geometry)

        assert result.pages[0].boxes == (wide,)
        assert len(result.warnings) == 1
        assert "wide" in result.warnings[0]
        assert "right margin" in caplog.text

    def test_paginate_when_boxes_inside_margins_then_no_warnings(self, geometry, make_box):
        boxes = [make_box(x=40, y=40), make_box(x=576, y=40, width=200)]

        assert paginate(boxes, geometry).warnings == []

    def test_paginate_when_page_count_then_matches_page_count(self, geometry, make_box):
        boxes = [make_box(y=y) for y in (40, 1200, 2300, 3300)]

        result = paginate(boxes, geometry)

        assert result.page_count == page_count(boxes, geometry) == 4
        assert [page.index for page in result.pages] == [0, 1, 2, 3]
        assert [page.box_count for page in result.pages] == [1, 1, 1, 1]

    def test_paginate_when_box_taller_than_page_then_warning(self, make_box):
        geometry = PageGeometry(page_height=400, margin=40)
        tall = make_box(x=40, y=40, height=350, box_id="tall")

        result = paginate([tall], geometry)

        assert len(result.warnings) == 1
        assert "taller than the printable page" in result.warnings[0]


class TestPageCountMonotonic:
    """Adding boxes never reduces the page count."""

    def test_count_when_boxes_added_then_never_decreases(self, geometry, make_box):
        placed = []
        counts = []
        for width, height in [(200, 150), (450, 500), (300, 120), (160, 100), (400, 480)] * 6:
            position = find_position(width, height, placed, geometry)
            placed.append(make_box(x=position.x, y=position.y, width=width, height=height))
            counts.append(page_count(placed, geometry))

        assert counts == sorted(counts)
        assert counts[-1] > 1
