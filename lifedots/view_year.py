"""
Year View
Twelve small month grids arranged 3 across and 4 down
"""

from datetime import date
from typing import List, Optional, Tuple

from .calendar_math import (day_of_year, days_in_month, days_in_year,
                            floor_percent, weekday_offset)
from .models import (Cell, GridMetrics, Labels, Layout, RenderConfig,
                     TemporalState, TypeScale, ViewMode, WALLPAPER)
from .plan import TextRun
from .view_month import grid_cell

MODE = ViewMode.YEAR

BLOCK_COLUMNS = 3
BLOCK_ROWS = 4
BLOCK_WIDTH_DIVISOR = 3.5
BLOCK_HEIGHT = 0.12
SPACING_DIVISOR = 8.5
RADIUS_DIVISOR = 3.8
MONTH_LABEL_GAP = 15
TITLE_GAP = 80
STATS_GAP = 40


def classify(day: date, today: date) -> TemporalState:
    if day < today:
        return TemporalState.PAST
    if day == today:
        return TemporalState.CURRENT
    return TemporalState.FUTURE


def block_origin(month_index: int, metrics: GridMetrics) -> Tuple[float, float]:
    """Top-left dot position of a month block"""
    col = month_index % BLOCK_COLUMNS
    row = month_index // BLOCK_COLUMNS
    return (
        metrics.origin_x + col * metrics.block_width,
        metrics.origin_y + row * metrics.block_height,
    )


def partition(config: RenderConfig, labels: Optional[Labels] = None) -> List[Cell]:
    today = config.reference_date
    year = today.year
    cells = []
    for month_index in range(12):
        for day in range(1, days_in_month(year, month_index + 1) + 1):
            label = None
            if labels is not None and day == 1:
                label = labels.month_abbreviations[month_index]
            cells.append(Cell(
                index=len(cells),
                state=classify(date(year, month_index + 1, day), today),
                label=label,
                month_index=month_index,
                day=day,
            ))
    return cells


def layout(cells: List[Cell], config: RenderConfig, type_scale: TypeScale = WALLPAPER) -> Layout:
    width = config.viewport_width
    height = config.viewport_height
    year = config.reference_date.year

    block_width = width / BLOCK_WIDTH_DIVISOR
    block_height = height * BLOCK_HEIGHT
    dot_spacing = block_width / SPACING_DIVISOR
    grid_width = block_width * BLOCK_COLUMNS
    grid_height = block_height * BLOCK_ROWS
    start_x = (width - grid_width) / 2
    start_y = (height - grid_height) / 2

    metrics = GridMetrics(
        dot_spacing=dot_spacing,
        dot_radius=dot_spacing / RADIUS_DIVISOR,
        origin_x=start_x,
        origin_y=start_y,
        row_pitch=dot_spacing,
        columns=7,
        block_width=block_width,
        block_height=block_height,
        block_columns=BLOCK_COLUMNS,
        block_rows=BLOCK_ROWS,
    )

    offsets = [weekday_offset(year, m + 1) for m in range(12)]
    positions = {}
    label_runs = []
    for cell in cells:
        block_x, block_y = block_origin(cell.month_index, metrics)
        col, row = grid_cell(cell.day, offsets[cell.month_index])
        positions[cell.index] = (block_x + col * dot_spacing, block_y + row * dot_spacing)
        if cell.label:
            label_runs.append(TextRun(
                x=block_x,
                y=block_y - MONTH_LABEL_GAP,
                text=cell.label,
                font_size=type_scale.mini_label,
                color=config.colors.text,
                bold=True,
            ))

    return Layout(
        positions=positions,
        metrics=metrics,
        title_anchor=(start_x, start_y - TITLE_GAP),
        stats_anchor=(start_x, start_y + grid_height + STATS_GAP),
        labels=label_runs,
    )


def progress(cells: List[Cell], config: RenderConfig) -> Tuple[int, int]:
    """(percent of the year passed, days remaining)"""
    total_days = days_in_year(config.reference_date.year)
    passed = day_of_year(config.reference_date)
    return floor_percent(passed, total_days), total_days - passed


def title(config: RenderConfig, labels: Labels) -> str:
    return labels.year_title.format(year=config.reference_date.year)


def stats_labels(labels: Labels) -> Tuple[str, str]:
    return labels.year_progress, labels.year_remaining
