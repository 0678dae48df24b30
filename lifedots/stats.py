"""
Stats Line
Progress percentage and remaining count laid out as four text runs
"""

from typing import Callable, List, Optional

from .models import Cell, Labels, Point, RenderConfig, TypeScale, WALLPAPER
from .plan import TextRun
from .views import get_view

# measure_width(text, font_size) -> advance in pixels
MeasureWidth = Callable[[str, float], float]


def layout_runs(origin: Point, segments, measure_width: MeasureWidth,
                measure_bold_width: Optional[MeasureWidth] = None) -> List[TextRun]:
    """
    Place runs left to right, each starting where the previous one ended.

    Args:
        origin: (x, baseline y) of the first run
        segments: iterable of (text, font_size, color, bold)
        measure_width: font metrics supplied by the drawing backend
        measure_bold_width: metrics for bold runs, measure_width when omitted

    Returns:
        TextRuns with cumulative x positions
    """
    measure_bold_width = measure_bold_width or measure_width
    x, y = origin
    runs = []
    for text, font_size, color, bold in segments:
        runs.append(TextRun(x=x, y=y, text=text, font_size=font_size, color=color, bold=bold))
        measure = measure_bold_width if bold else measure_width
        x += measure(text, font_size)
    return runs


def compose(cells: List[Cell], config: RenderConfig, origin: Point,
            measure_width: MeasureWidth, labels: Labels,
            type_scale: TypeScale = WALLPAPER,
            measure_bold_width: Optional[MeasureWidth] = None) -> List[TextRun]:
    """Build the "value label value label" stats line, empty when stats are hidden"""
    if not config.show_stats:
        return []

    view = get_view(config.view_mode)
    percent, remaining = view.progress(cells, config)
    progress_label, remaining_label = view.stats_labels(labels)

    accent = config.colors.accent
    text = config.colors.text
    segments = [
        (f"{percent}%", type_scale.stats_value, accent, True),
        (progress_label, type_scale.stats_label, text, False),
        (f"{remaining}", type_scale.stats_value, accent, True),
        (remaining_label, type_scale.stats_label, text, False),
    ]
    return layout_runs(origin, segments, measure_width, measure_bold_width)
