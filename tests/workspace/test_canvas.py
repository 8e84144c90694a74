"""
Tests for Canvas operations.

Every operation returns a new Canvas; the tests check both the
returned state and that the original is untouched.
"""

import pytest

from cheatsheet_toolkit.layout import PageGeometry, boxes_overlap
from cheatsheet_toolkit.workspace import BoxNotFoundError, Canvas, NewBox


class TestCanvasAdd:

    def test_add_when_empty_then_sized_and_at_margin(self):
        """First box lands at (margin, margin) with its estimated size."""
        # Act
        canvas, box = Canvas().add_box("Pythagorean Theorem", "a^2 + b^2 = c^2")

        # Assert
        assert (box.x, box.y) == (40, 40)
        assert (box.width, box.height) == (240, 182)
        assert canvas.boxes == (box,)

    def test_add_when_second_box_then_packed_right(self):
        canvas, first = Canvas().add_box("Pythagorean Theorem", "a^2 + b^2 = c^2")

        canvas, second = canvas.add_box("Pythagorean Theorem", "a^2 + b^2 = c^2")

        assert (second.x, second.y) == (first.right + 8, 40)
        assert len(canvas) == 2

    def test_add_when_explicit_position_then_used_as_is(self):
        canvas, first = Canvas().add_box("A", "")

        canvas, manual = canvas.add_box("B", "", position=(50, 50))

        assert (manual.x, manual.y) == (50, 50)
        assert boxes_overlap(canvas.boxes) == [(first, manual)]

    def test_add_when_negative_position_then_pinned_to_zero(self):
        _, box = Canvas().add_box("A", "", position=(-25, -3))

        assert (box.x, box.y) == (0, 0)

    def test_add_when_box_id_given_then_kept(self):
        _, box = Canvas().add_box("A", "", box_id="fixed")

        assert box.id == "fixed"

    def test_add_when_no_id_then_unique_ids(self):
        canvas = Canvas()
        for _ in range(5):
            canvas, _ = canvas.add_box("A", "")

        assert len({box.id for box in canvas.boxes}) == 5

    def test_add_when_called_then_original_unchanged(self):
        original = Canvas()

        original.add_box("A", "")

        assert len(original) == 0

    def test_add_batch_when_items_then_ordered_and_overlap_free(self, formula_items):
        """A generated batch lands as one commit, each item seeing the ones before."""
        canvas, added = Canvas(title="Calculus").add_boxes(formula_items)

        assert [box.title for box in canvas.boxes] == [item["title"] for item in formula_items]
        assert list(canvas.boxes) == added
        assert boxes_overlap(canvas.boxes) == []
        assert added[0].color == "from-blue-50 to-blue-100"
        assert canvas.title == "Calculus"

    def test_add_batch_when_new_box_specs_then_accepted(self):
        canvas, added = Canvas().add_boxes([NewBox("A", "x"), {"title": "B", "content": "y"}])

        assert [box.title for box in added] == ["A", "B"]
        assert added[1].color == "from-blue-50 to-blue-100"
        assert len(canvas) == 2


class TestCanvasQueries:

    def test_get_when_missing_then_box_not_found(self):
        with pytest.raises(BoxNotFoundError) as exc_info:
            Canvas().get("nope")

        assert isinstance(exc_info.value, KeyError)
        assert exc_info.value.box_id == "nope"
        assert str(exc_info.value) == "Box not found: 'nope'"

    def test_numbering_when_boxes_then_one_based_insertion_order(self, make_box):
        a, b = make_box(), make_box(y=200)
        canvas = Canvas(boxes=(a, b))

        assert canvas.box_number(b.id) == 2
        assert canvas.box_at(1) == a
        assert canvas.box_at(0) is None
        assert canvas.box_at(3) is None

    def test_pages_when_thirty_boxes_relaid_then_two_pages(self, make_box):
        canvas = Canvas(boxes=tuple(make_box() for _ in range(30))).relayout()

        assert canvas.page_count() == 2
        # Row at y=988 straddles the cut and shows on both pages
        assert len(canvas.boxes_for_page(0)) == 21
        assert len(canvas.boxes_for_page(1)) == 12
        assert canvas.paginate().page_count == 2

    def test_pages_when_empty_then_one(self):
        assert Canvas().page_count() == 1


class TestCanvasEditing:

    def test_delete_when_removed_then_others_keep_positions(self, make_box):
        a, b, c = make_box(x=40, y=40), make_box(x=248, y=40), make_box(x=456, y=40)
        canvas = Canvas(boxes=(a, b, c))

        updated = canvas.delete_box(b.id)

        assert updated.boxes == (a, c)
        assert len(canvas) == 3

    def test_delete_when_missing_then_box_not_found(self):
        with pytest.raises(BoxNotFoundError):
            Canvas().delete_box("nope")

    def test_copy_when_copied_then_offset_and_appended(self, make_box):
        source = make_box(x=40, y=40, title="Chain Rule")
        canvas = Canvas(boxes=(source, make_box(y=300)))

        updated, copy = canvas.copy_box(source.id)

        assert updated.boxes[-1] == copy
        assert copy.id != source.id
        assert copy.title == "Chain Rule (Copy)"
        assert (copy.x, copy.y) == (60, 60)
        assert (copy.width, copy.height, copy.content) == (source.width, source.height, source.content)

    def test_move_when_negative_then_pinned_to_zero(self, make_box):
        box = make_box(x=40, y=40)

        moved = Canvas(boxes=(box,)).move_box(box.id, -30, 500).get(box.id)

        assert (moved.x, moved.y) == (0, 500)

    def test_resize_when_out_of_range_then_clamped(self, make_box):
        box = make_box()
        canvas = Canvas(boxes=(box,))

        assert canvas.resize_box(box.id, 10, 10).get(box.id).width == 160
        assert canvas.resize_box(box.id, 999, 999).get(box.id).height == 500

    def test_update_when_resize_requested_then_sizer_reruns(self, make_box):
        box = make_box(width=400, height=400)

        updated = Canvas(boxes=(box,)).update_box(
            box.id, resize=True, title="Pythagorean Theorem", content="a^2 + b^2 = c^2"
        ).get(box.id)

        assert (updated.width, updated.height) == (240, 182)
        assert (updated.x, updated.y) == (box.x, box.y)

    def test_update_when_size_out_of_range_then_clamped(self, make_box):
        box = make_box()

        updated = Canvas(boxes=(box,)).update_box(box.id, width=5, height=9000).get(box.id)

        assert (updated.width, updated.height) == (160, 500)

    def test_update_when_only_width_given_then_height_kept(self, make_box):
        box = make_box(width=200, height=150)

        updated = Canvas(boxes=(box,)).update_box(box.id, width=1000).get(box.id)

        assert (updated.width, updated.height) == (450, 150)

    def test_update_when_plain_change_then_size_kept(self, make_box):
        box = make_box(width=400, height=400)

        updated = Canvas(boxes=(box,)).update_box(box.id, content="new").get(box.id)

        assert updated.content == "new"
        assert (updated.width, updated.height) == (400, 400)

    def test_recolor_when_called_then_color_changes(self, make_box):
        box = make_box()

        assert Canvas(boxes=(box,)).recolor_box(box.id, "red").get(box.id).color == "red"

    def test_clear_when_called_then_empty(self, make_box):
        canvas = Canvas(boxes=(make_box(), make_box()), title="Keep")

        cleared = canvas.clear()

        assert len(cleared) == 0
        assert cleared.title == "Keep"


class TestCanvasLayout:

    def test_relayout_when_overlapping_then_repaired_in_order(self, make_box):
        boxes = tuple(make_box(x=100, y=100) for _ in range(5))

        canvas = Canvas(boxes=boxes).relayout()

        assert [box.id for box in canvas.boxes] == [box.id for box in boxes]
        assert boxes_overlap(canvas.boxes) == []

    def test_with_geometry_when_changed_then_repacked(self, make_box):
        canvas = Canvas(boxes=(make_box(x=40, y=40),))

        updated = canvas.with_geometry(PageGeometry(margin=20))

        assert (updated.boxes[0].x, updated.boxes[0].y) == (20, 20)
        assert updated.geometry.margin == 20

    def test_with_geometry_when_smaller_size_range_then_boxes_clamped(self):
        canvas, _ = Canvas().add_box("t" * 60, "x" * 2000)
        assert canvas.boxes[0].width > 300

        updated = canvas.with_geometry(PageGeometry(max_width=300, max_height=300))

        box = updated.boxes[0]
        assert (box.width, box.height) == (300, 300)
        assert (box.x, box.y) == (40, 40)

    def test_with_geometry_when_no_relayout_then_positions_kept(self, make_box):
        canvas = Canvas(boxes=(make_box(x=40, y=40),))

        updated = canvas.with_geometry(PageGeometry(margin=20), relayout=False)

        assert (updated.boxes[0].x, updated.boxes[0].y) == (40, 40)
