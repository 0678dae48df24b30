"""
Life View
One dot per week of an expected lifespan, two years per row
"""

from typing import List, Optional, Tuple

from .calendar_math import (WEEKS_PER_YEAR, floor_percent, total_weeks,
                            weeks_elapsed)
from .models import (Cell, GridMetrics, Labels, Layout, RenderConfig,
                     TemporalState, TypeScale, ViewMode, WALLPAPER)
from .plan import ALIGN_RIGHT, TextRun

MODE = ViewMode.LIFE

COLUMNS = 2 * WEEKS_PER_YEAR
SIDE_MARGIN = 0.2
SPACING_DIVISOR = 105
RADIUS_DIVISOR = 2.8
ROW_PITCH = 1.8  # in dot spacings, leaves room for decade labels
GRID_LEFT = 0.12
GRID_TOP = 0.2
LABEL_GAP = 25
TITLE_GAP = 80
STATS_TOP = 0.95
DECADE = 10


def classify(week: int, elapsed: int) -> TemporalState:
    # elapsed is not clamped: negative marks everything FUTURE,
    # anything past the last week marks everything PAST
    if week < elapsed:
        return TemporalState.PAST
    if week == elapsed:
        return TemporalState.CURRENT
    return TemporalState.FUTURE


def is_decade_start(week: int) -> bool:
    """Row start whose age in years is a multiple of ten"""
    return week % COLUMNS == 0 and (week // WEEKS_PER_YEAR) % DECADE == 0


def partition(config: RenderConfig, labels: Optional[Labels] = None) -> List[Cell]:
    elapsed = weeks_elapsed(config.birth_date, config.reference_date)
    cells = []
    for week in range(total_weeks(config.life_expectancy_years)):
        label = None
        if is_decade_start(week):
            years = week // WEEKS_PER_YEAR
            label = labels.decade_label.format(years=years) if labels else str(years)
        cells.append(Cell(index=week, state=classify(week, elapsed), label=label, week=week))
    return cells


def layout(cells: List[Cell], config: RenderConfig, type_scale: TypeScale = WALLPAPER) -> Layout:
    width = config.viewport_width
    height = config.viewport_height

    dot_spacing = (width - width * SIDE_MARGIN) / SPACING_DIVISOR
    dot_radius = dot_spacing / RADIUS_DIVISOR
    row_pitch = dot_spacing * ROW_PITCH
    start_x = width * GRID_LEFT
    start_y = height * GRID_TOP

    positions = {}
    label_runs = []
    for cell in cells:
        x = start_x + (cell.week % COLUMNS) * dot_spacing
        y = start_y + (cell.week // COLUMNS) * row_pitch
        positions[cell.index] = (x, y)
        if cell.label is not None:
            label_runs.append(TextRun(
                x=start_x - LABEL_GAP,
                y=y + dot_radius,
                text=cell.label,
                font_size=type_scale.side_label,
                color=config.colors.text,
                align=ALIGN_RIGHT,
            ))

    metrics = GridMetrics(
        dot_spacing=dot_spacing,
        dot_radius=dot_radius,
        origin_x=start_x,
        origin_y=start_y,
        row_pitch=row_pitch,
        columns=COLUMNS,
    )
    return Layout(
        positions=positions,
        metrics=metrics,
        title_anchor=(start_x, start_y - TITLE_GAP),
        stats_anchor=(start_x, height * STATS_TOP),
        labels=label_runs,
    )


def progress(cells: List[Cell], config: RenderConfig) -> Tuple[int, int]:
    """(percent of life lived, weeks remaining); neither is clamped"""
    weeks = total_weeks(config.life_expectancy_years)
    elapsed = weeks_elapsed(config.birth_date, config.reference_date)
    return floor_percent(elapsed, weeks), weeks - elapsed


def title(config: RenderConfig, labels: Labels) -> str:
    return labels.life_title


def stats_labels(labels: Labels) -> Tuple[str, str]:
    return labels.life_progress, labels.life_remaining
