"""
Render Engine
Turns a RenderConfig into a DrawPlan for any 2D drawing backend
"""

from typing import Optional

from .labels import ENGLISH
from .models import Labels, RenderConfig, TemporalState, TypeScale, WALLPAPER
from .plan import Circle, DrawPlan, TextRun, Transform
from .stats import MeasureWidth, compose
from .views import get_view, list_views


def state_color(state: TemporalState, config: RenderConfig):
    colors = config.colors
    if state is TemporalState.PAST:
        return colors.accent
    if state is TemporalState.CURRENT:
        return colors.today
    return colors.future


def render(config: RenderConfig, measure_width: MeasureWidth,
           labels: Optional[Labels] = None,
           type_scale: TypeScale = WALLPAPER,
           measure_bold_width: Optional[MeasureWidth] = None) -> DrawPlan:
    """
    Compute the full draw plan for one frame.

    Args:
        config: resolved settings snapshot, including the reference date
        measure_width: measure_width(text, font_size) from the backend
        labels: pre-localized strings, English when omitted
        type_scale: font sizes (WALLPAPER or PREVIEW)
        measure_bold_width: metrics for the bold stats values, measure_width
            when omitted

    Returns:
        DrawPlan in viewport coordinates with scale and offset applied
    """
    labels = labels or ENGLISH
    view = get_view(config.view_mode)
    if view is None:
        available = ', '.join(mode.name for mode in list_views())
        raise ValueError(f"No view for {config.view_mode}; available: {available}")

    cells = view.partition(config, labels)
    layout = view.layout(cells, config, type_scale)
    metrics = layout.metrics

    plan = DrawPlan(background=config.colors.background)

    if config.show_title:
        title_x, title_y = layout.title_anchor
        plan.add(TextRun(
            x=title_x,
            y=title_y,
            text=view.title(config, labels),
            font_size=type_scale.title,
            color=config.colors.text,
            bold=True,
        ))

    plan.extend(layout.labels)

    for cell in cells:
        x, y = layout.positions[cell.index]
        plan.add(Circle(x=x, y=y, radius=metrics.dot_radius, color=state_color(cell.state, config)))

    plan.extend(compose(cells, config, layout.stats_anchor, measure_width, labels,
                        type_scale, measure_bold_width))

    transform = Transform.for_viewport(
        config.viewport_width,
        config.viewport_height,
        config.scale,
        config.offset_x,
        config.offset_y,
    )
    return plan.transformed(transform)
