from datetime import date

import pytest

from lifedots.engine import render
from lifedots.labels import RUSSIAN
from lifedots.models import Palette, ViewMode
from lifedots.plan import Circle, DrawPlan, TextRun, Transform


class TestTransform:
    def test_identity_at_defaults(self):
        t = Transform.for_viewport(1000, 2000, 1.0, 0.5, 0.5)
        assert t.apply(123.0, 456.0) == pytest.approx((123.0, 456.0))

    def test_scale_about_center(self):
        t = Transform.for_viewport(1000, 2000, 2.0, 0.5, 0.5)
        assert t.apply(500, 1000) == pytest.approx((500, 1000))
        assert t.apply(600, 1000) == pytest.approx((700, 1000))
        assert t.length(5) == 10

    def test_pan(self):
        t = Transform.for_viewport(1000, 2000, 1.0, 1.0, 0.0)
        assert t.apply(0, 0) == pytest.approx((500, -1000))

    def test_plan_transform_scales_radius_and_font(self):
        plan = DrawPlan(background=(0, 0, 0, 255))
        plan.add(Circle(x=600, y=1000, radius=4, color=(1, 1, 1, 255)))
        plan.add(TextRun(x=500, y=900, text="A", font_size=10, color=(1, 1, 1, 255)))
        out = plan.transformed(Transform.for_viewport(1000, 2000, 2.0, 0.5, 0.5))
        assert out.circles[0].radius == 8
        assert out.circles[0].x == pytest.approx(700)
        assert out.text_runs[0].font_size == 20
        assert out.text_runs[0].y == pytest.approx(800)


def test_month_plan(make_config, measure):
    config = make_config(reference_date=date(2025, 6, 15))
    plan = render(config, measure)
    colors = config.colors
    assert plan.background == colors.background
    assert len(plan.circles) == 30
    fills = [c.color for c in plan.circles]
    assert fills.count(colors.today) == 1
    assert fills.count(colors.accent) == 14
    assert fills.count(colors.future) == 15
    texts = [r.text for r in plan.text_runs]
    assert texts[0] == "JUNE"
    assert texts[1:] == ["50%", " LIVED  •  ", "15", " DAYS LEFT"]


def test_toggles_hide_text(make_config, measure):
    config = make_config(show_title=False, show_stats=False)
    plan = render(config, measure)
    assert plan.text_runs == []


def test_year_plan_has_month_labels(make_config, measure):
    config = make_config(view_mode=ViewMode.YEAR)
    plan = render(config, measure, RUSSIAN)
    texts = [r.text for r in plan.text_runs]
    assert texts[0] == "2025 ГОД"
    assert texts[1:13] == list(RUSSIAN.month_abbreviations)
    assert len(plan.circles) == 365


def test_life_plan(make_config, measure):
    config = make_config(view_mode=ViewMode.LIFE, birth_date=date(2025, 6, 15))
    plan = render(config, measure)
    assert len(plan.circles) == 4160
    assert plan.circles[0].color == config.colors.today
    right_aligned = [r.text for r in plan.text_runs if r.align == "right"]
    assert right_aligned == ["0", "10", "20", "30", "40", "50", "60", "70"]
    assert plan.text_runs[-4].text == "0%"


def test_viewport_transform_is_applied(make_config, measure):
    base = render(make_config(), measure)
    zoomed = render(make_config(scale=2.0, offset_x=0.6), measure)
    for before, after in zip(base.circles, zoomed.circles):
        assert after.radius == pytest.approx(before.radius * 2)
        assert after.x == pytest.approx(540 + 2 * (before.x - 540) + 0.1 * 1080)
        assert after.y == pytest.approx(1200 + 2 * (before.y - 1200))


def test_render_is_idempotent(make_config, measure):
    config = make_config(view_mode=ViewMode.LIFE, colors=Palette(today=(0, 0, 255, 255)))
    assert render(config, measure) == render(config, measure)


def test_two_argument_metrics(make_config):
    config = make_config(reference_date=date(2025, 6, 15))
    plan = render(config, lambda text, font_size: 30.0)
    stats = plan.text_runs[-4:]
    assert [r.text for r in stats] == ["50%", " LIVED  •  ", "15", " DAYS LEFT"]
    assert stats[1].x - stats[0].x == pytest.approx(30.0)
    assert stats[3].x - stats[2].x == pytest.approx(30.0)


def test_bold_metrics_only_move_runs_after_values(make_config):
    config = make_config(reference_date=date(2025, 6, 15))
    plan = render(config, lambda text, font_size: 10.0,
                  measure_bold_width=lambda text, font_size: 50.0)
    xs = [r.x for r in plan.text_runs[-4:]]
    assert [b - a for a, b in zip(xs, xs[1:])] == pytest.approx([50.0, 10.0, 50.0])
