"""
Render Models
Value types shared by the partitioner, the grid mapper and the stats line
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .plan import Color, Point, TextRun


class ViewMode(Enum):
    MONTH = "MONTH"
    YEAR = "YEAR"
    LIFE = "LIFE"


class TemporalState(Enum):
    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"


@dataclass(frozen=True)
class Palette:
    """RGBA colors for one render"""
    background: Color = (0, 0, 0, 255)
    accent: Color = (76, 175, 80, 255)
    future: Color = (34, 34, 34, 255)
    text: Color = (255, 255, 255, 255)
    today: Color = (255, 0, 0, 255)


@dataclass(frozen=True)
class RenderConfig:
    """
    Fully resolved snapshot of everything one render needs.

    reference_date is "today" and is always supplied by the caller so the
    whole plan is computed against a single date.
    """
    view_mode: ViewMode
    reference_date: date
    viewport_width: float
    viewport_height: float
    birth_date: date = date(2000, 1, 1)
    life_expectancy_years: int = 80
    scale: float = 1.0
    offset_x: float = 0.5
    offset_y: float = 0.5
    show_title: bool = True
    show_stats: bool = True
    colors: Palette = field(default_factory=Palette)


@dataclass(frozen=True)
class Cell:
    index: int
    state: TemporalState
    label: Optional[str] = None
    month_index: Optional[int] = None
    day: Optional[int] = None
    week: Optional[int] = None


@dataclass(frozen=True)
class GridMetrics:
    dot_spacing: float
    dot_radius: float
    origin_x: float
    origin_y: float
    row_pitch: float
    columns: int
    # Year view only: the 3 x 4 arrangement of month blocks
    block_width: Optional[float] = None
    block_height: Optional[float] = None
    block_columns: Optional[int] = None
    block_rows: Optional[int] = None


@dataclass(frozen=True)
class TypeScale:
    """Font sizes in pixels before the viewport scale is applied"""
    title: float
    mini_label: float
    side_label: float
    stats_value: float
    stats_label: float


# Live wallpaper sizes
WALLPAPER = TypeScale(title=70, mini_label=24, side_label=24, stats_value=38, stats_label=32)
# Settings screen preview sizes
PREVIEW = TypeScale(title=45, mini_label=18, side_label=16, stats_value=28, stats_label=24)


@dataclass(frozen=True)
class Labels:
    """
    Pre-localized strings supplied by the caller.

    Titles are format templates; the engine only substitutes numbers into
    them and never looks up locale data itself.
    """
    month_names: Tuple[str, ...]
    month_abbreviations: Tuple[str, ...]
    year_title: str = "{year}"
    life_title: str = "LIFE CALENDAR"
    decade_label: str = "{years}"
    month_progress: str = " LIVED  •  "
    month_remaining: str = " DAYS LEFT"
    year_progress: str = " OF YEAR  •  "
    year_remaining: str = " DAYS LEFT"
    life_progress: str = " OF LIFE  •  "
    life_remaining: str = " WEEKS LEFT"


@dataclass
class Layout:
    """Grid positions and text anchors, all in untransformed viewport coordinates"""
    positions: Dict[int, Point]
    metrics: GridMetrics
    title_anchor: Point
    stats_anchor: Point
    labels: List[TextRun] = field(default_factory=list)
