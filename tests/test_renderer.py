import pytest
from PySide6.QtGui import QColor, QImage

from fibonaccispiral.controller.renderer import (
    SpiralRenderer, color_for_index, compute_scale, font_size_for,
)
from fibonaccispiral.model.layout import BoundingBox, compute_layout
from fibonaccispiral.model.sequence import generate_fibonacci

WHITE = QColor("#ffffff")


def _close(a: QColor, b: QColor, tol: int = 2) -> bool:
    return all(abs(x - y) <= tol for x, y in zip(a.getRgb()[:3], b.getRgb()[:3]))


@pytest.fixture
def renderer(qapp):
    surface = QImage(200, 200, QImage.Format.Format_RGB32)
    return SpiralRenderer(surface, margin=20)


class TestScale:

    def test_uses_smaller_axis(self):
        bounds = BoundingBox(min_x=0, max_x=10, min_y=0, max_y=5)
        assert compute_scale(bounds, 600, 600, 40) == pytest.approx(52.0)

    def test_zero_area_box_does_not_divide_by_zero(self):
        assert compute_scale(BoundingBox(), 600, 600, 40) == pytest.approx(520.0)

    def test_zero_height_only(self):
        bounds = BoundingBox(min_x=0, max_x=4, min_y=3, max_y=3)
        assert compute_scale(bounds, 600, 400, 40) == pytest.approx(130.0)

    def test_layout_fits_inside_margin(self):
        layout = compute_layout(generate_fibonacci(12))
        scale = compute_scale(layout.bounds, 600, 600, 40)
        assert layout.bounds.width * scale <= 520 + 1e-9
        assert layout.bounds.height * scale <= 520 + 1e-9


class TestPolicies:

    def test_hue_sweeps_with_index(self):
        hues = [color_for_index(i, 10).hslHueF() for i in range(10)]
        assert hues[0] == pytest.approx(0.0, abs=1e-3)
        assert hues == sorted(hues)
        assert len(set(round(h, 3) for h in hues)) == 10

    def test_saturation_and_lightness_fixed(self):
        color = color_for_index(3, 7)
        assert color.hslSaturationF() == pytest.approx(0.7, abs=0.01)
        assert color.lightnessF() == pytest.approx(0.6, abs=0.01)

    def test_font_size_floor(self):
        assert font_size_for(10) == 12
        assert font_size_for(100) == pytest.approx(30.0)


class TestSpiralRenderer:

    def test_new_surface_is_white(self, renderer):
        assert renderer.surface.pixelColor(100, 100) == WHITE

    def test_default_surface_size(self, qapp):
        renderer = SpiralRenderer()
        assert (renderer.surface.width(), renderer.surface.height()) == (600, 600)

    def test_square_rect_maps_grid_to_surface(self, renderer):
        layout = compute_layout([1, 1])
        renderer.begin(layout, 2)
        assert renderer.scale == pytest.approx(80.0)
        first = renderer.square_rect(layout[0])
        second = renderer.square_rect(layout[1])
        assert (first.x(), first.y(), first.width()) == (20, 20, 80)
        assert (second.x(), second.y(), second.width()) == (100, 20, 80)

    def test_box_minimum_lands_on_margin(self, renderer):
        layout = compute_layout(generate_fibonacci(8))
        renderer.begin(layout, 8)
        rects = [renderer.square_rect(s) for s in layout]
        assert min(r.left() for r in rects) == pytest.approx(20)
        assert min(r.top() for r in rects) == pytest.approx(20)

    def test_paint_square_fills_with_index_color(self, renderer):
        layout = compute_layout([1])
        renderer.begin(layout, 1)
        renderer.paint_square(layout[0])

        assert _close(renderer.surface.pixelColor(30, 100), color_for_index(0, 1))
        # margin stays untouched
        assert renderer.surface.pixelColor(5, 5) == WHITE

    def test_rendered_hues_follow_index(self, renderer):
        layout = compute_layout(generate_fibonacci(5))
        renderer.render(layout, 5)

        sampled = []
        for square in layout:
            rect = renderer.square_rect(square)
            # between corner and centre: clear of the border and the label
            x = int(rect.left() + rect.width() * 0.25)
            y = int(rect.top() + rect.height() * 0.25)
            color = renderer.surface.pixelColor(x, y)
            assert _close(color, color_for_index(square.index, 5))
            sampled.append(color.hslHueF())

        assert sampled == sorted(sampled)
        assert len(set(round(h, 2) for h in sampled)) == 5

    def test_to_surface_matches_square_rect(self, renderer):
        layout = compute_layout(generate_fibonacci(6))
        renderer.begin(layout, 6)
        for square in layout:
            rect = renderer.square_rect(square)
            center = renderer.to_surface(*square.center)
            assert center.x() == pytest.approx(rect.center().x())
            assert center.y() == pytest.approx(rect.center().y())

    def test_paint_curve_draws_between_centers(self, renderer):
        layout = compute_layout([1, 1])
        renderer.begin(layout, 2)
        for square in layout:
            renderer.paint_square(square)

        before = renderer.surface.copy()
        renderer.paint_curve()
        after = renderer.surface

        changed = [x for x in range(60, 141) if before.pixelColor(x, 60) != after.pixelColor(x, 60)]
        assert changed
        grey = [after.pixelColor(x, 60) for x in changed]
        assert any(c.red() == c.green() == c.blue() and c.red() < 150 for c in grey)

    def test_curve_needs_two_squares(self, renderer):
        layout = compute_layout([1])
        renderer.begin(layout, 1)
        renderer.paint_square(layout[0])
        before = renderer.surface.copy()
        renderer.paint_curve()
        assert renderer.surface == before

    def test_render_notifies_per_paint(self, renderer):
        events = []
        renderer.surface_changed.connect(lambda: events.append(1))
        renderer.render(compute_layout([1, 1, 2]), 3)
        # clear + three squares + curve
        assert len(events) == 5

    def test_begin_clears_previous_drawing(self, renderer):
        renderer.render(compute_layout([1]), 1)
        assert renderer.surface.pixelColor(30, 100) != WHITE
        renderer.begin(compute_layout([]), 0)
        assert renderer.surface.pixelColor(30, 100) == WHITE
