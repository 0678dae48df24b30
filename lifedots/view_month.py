"""
Month View
Every day of the current month as a dot in a Monday-first 7-column grid
"""

from typing import List, Optional, Tuple

from .calendar_math import days_in_month, floor_percent, weekday_offset
from .models import (Cell, GridMetrics, Labels, Layout, RenderConfig,
                     TemporalState, TypeScale, ViewMode, WALLPAPER)

MODE = ViewMode.MONTH

# Layout parameters, as fractions of the viewport
COLUMNS = 7
SPACING_DIVISOR = 8.5
RADIUS_DIVISOR = 3.2
GRID_TOP = 0.35
TITLE_GAP = 100
STATS_GAP = 1.2  # in dot spacings below the last row


def classify(day: int, reference_day: int) -> TemporalState:
    if day < reference_day:
        return TemporalState.PAST
    if day == reference_day:
        return TemporalState.CURRENT
    return TemporalState.FUTURE


def grid_cell(day: int, offset: int) -> Tuple[int, int]:
    """(column, row) of a day in a 7-column grid with offset leading blanks"""
    slot = day + offset - 1
    return slot % COLUMNS, slot // COLUMNS


def partition(config: RenderConfig, labels: Optional[Labels] = None) -> List[Cell]:
    today = config.reference_date
    month_index = today.month - 1
    return [
        Cell(
            index=day - 1,
            state=classify(day, today.day),
            month_index=month_index,
            day=day,
        )
        for day in range(1, days_in_month(today.year, today.month) + 1)
    ]


def layout(cells: List[Cell], config: RenderConfig, type_scale: TypeScale = WALLPAPER) -> Layout:
    width = config.viewport_width
    height = config.viewport_height
    today = config.reference_date
    offset = weekday_offset(today.year, today.month)

    dot_spacing = width / SPACING_DIVISOR
    dot_radius = dot_spacing / RADIUS_DIVISOR
    # Centered on the 6 gaps between the 7 column centers
    start_x = (width - (COLUMNS - 1) * dot_spacing) / 2
    start_y = height * GRID_TOP

    positions = {}
    last_y = start_y
    for cell in cells:
        col, row = grid_cell(cell.day, offset)
        x = start_x + col * dot_spacing
        y = start_y + row * dot_spacing
        positions[cell.index] = (x, y)
        last_y = y

    metrics = GridMetrics(
        dot_spacing=dot_spacing,
        dot_radius=dot_radius,
        origin_x=start_x,
        origin_y=start_y,
        row_pitch=dot_spacing,
        columns=COLUMNS,
    )
    return Layout(
        positions=positions,
        metrics=metrics,
        title_anchor=(start_x, start_y - TITLE_GAP),
        stats_anchor=(start_x, last_y + dot_spacing * STATS_GAP),
    )


def progress(cells: List[Cell], config: RenderConfig) -> Tuple[int, int]:
    """(percent of the month lived, days remaining)"""
    total_days = len(cells)
    day = config.reference_date.day
    return floor_percent(day, total_days), total_days - day


def title(config: RenderConfig, labels: Labels) -> str:
    return labels.month_names[config.reference_date.month - 1]


def stats_labels(labels: Labels) -> Tuple[str, str]:
    return labels.month_progress, labels.month_remaining
