"""
Tests for PageGeometry validation, presets and clamping.
"""

import pytest

from cheatsheet_toolkit.layout import PAGE_PRESETS, PageGeometry


class TestPageGeometryDefaults:

    def test_defaults_when_constructed_then_letter_page(self):
        geometry = PageGeometry()

        assert (geometry.page_width, geometry.page_height) == (816, 1056)
        assert geometry.margin == 40
        assert geometry.spacing == 8
        assert geometry.usable_width == 736
        assert geometry.right_limit == 776

    def test_defaults_when_frozen_then_assignment_fails(self):
        geometry = PageGeometry()

        with pytest.raises(AttributeError):
            geometry.margin = 10


class TestPageGeometryValidation:

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"page_width": 0}, "page_width"),
            ({"page_height": -5}, "page_height"),
            ({"margin": -1}, "margin"),
            ({"spacing": -1}, "spacing"),
            ({"page_width": 80, "margin": 40}, "Margins exceed page width"),
            ({"min_width": 500, "max_width": 450}, "width range"),
            ({"min_height": 0}, "height range"),
        ],
    )
    def test_validation_when_invalid_then_value_error(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            PageGeometry(**kwargs)

    def test_validation_when_zero_margin_then_allowed(self):
        assert PageGeometry(margin=0).usable_width == 816


class TestPageGeometryClamp:

    @pytest.mark.parametrize(
        "size,expected",
        [
            ((100, 50), (160, 100)),
            ((1000, 1000), (450, 500)),
            ((240.4, 182.6), (240, 183)),
            ((160, 500), (160, 500)),
        ],
    )
    def test_clamp_when_sized_then_within_range(self, size, expected):
        assert PageGeometry().clamp_size(*size) == expected


class TestPageGeometryPresets:

    def test_preset_when_a4_then_a4_dimensions(self):
        geometry = PageGeometry.from_preset("A4")

        assert (geometry.page_width, geometry.page_height) == PAGE_PRESETS["a4"]
        assert geometry.margin == 40

    def test_preset_when_overrides_then_applied(self):
        geometry = PageGeometry.from_preset("legal", margin=20, spacing=12)

        assert geometry.page_height == 1344
        assert (geometry.margin, geometry.spacing) == (20, 12)

    def test_preset_when_unknown_then_value_error(self):
        with pytest.raises(ValueError, match="Unknown page preset"):
            PageGeometry.from_preset("postcard")


class TestPageGeometrySerialization:

    def test_to_dict_when_default_then_all_fields(self):
        data = PageGeometry().to_dict()

        assert data["page_width"] == 816
        assert data["max_height"] == 500
        assert len(data) == 8

    def test_from_dict_when_partial_then_defaults_fill_in(self):
        geometry = PageGeometry.from_dict({"margin": 24, "unknown": 3})

        assert geometry == PageGeometry(margin=24)

    def test_from_dict_when_round_tripped_then_equal(self):
        geometry = PageGeometry.from_preset("tabloid", spacing=4)

        assert PageGeometry.from_dict(geometry.to_dict()) == geometry

    def test_with_changes_when_called_then_copy(self):
        geometry = PageGeometry()

        changed = geometry.with_changes(spacing=16)

        assert changed.spacing == 16
        assert geometry.spacing == 8
