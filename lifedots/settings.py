"""
Settings
Loads the flat key-value settings map and resolves it into a RenderConfig.
Bad values never fail a render: they fall back to the defaults below.
"""

import json
import math
import os
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

from PIL import ImageColor

from .models import Palette, RenderConfig, ViewMode

CONFIG_FILE = Path(os.getenv(
    'LIFEDOTS_CONFIG',
    Path(__file__).resolve().parent.parent / 'wallpaper_config.json',
))

DEFAULT_SETTINGS: Dict[str, Any] = {
    'bg_color': '#000000',
    'accent_color': '#4CAF50',
    'future_color': '#222222',
    'text_color': '#FFFFFF',
    'today_color': '#FF0000',
    'calendar_type': 'MONTH',
    'birth_date': '2000-01-01',
    'life_expectancy': 80,
    'scale': 1.0,
    'offset_x': 0.5,
    'offset_y': 0.5,
    'show_title': True,
    'show_stats': True,
    'locale': 'en',
    'width': 1080,
    'height': 2400,
}

# Valid ranges, matching the settings screen sliders
LIFE_EXPECTANCY_RANGE = (50, 120)
SCALE_RANGE = (0.5, 2.0)
OFFSET_RANGE = (0.0, 1.0)
SIZE_RANGE = (1, 16384)


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file merged over the defaults.

    A missing file gives the defaults; an unreadable one is reported.
    """
    path = Path(path) if path else CONFIG_FILE
    settings = dict(DEFAULT_SETTINGS)
    if not path.exists():
        return settings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Warning: Could not read settings from {path}: {e}")
        return settings

    if not isinstance(stored, dict):
        print(f"Warning: Settings file {path} is not a JSON object, using defaults")
        return settings

    settings.update(stored)
    return settings


def parse_color(value: str):
    """
    Parse a color string into an RGBA tuple.

    Accepts anything Pillow's ImageColor does (#RGB, #RRGGBB, names) plus
    #AARRGGBB, the order the Android preferences store alpha in.
    """
    if not isinstance(value, str):
        raise ValueError(f"color must be a string, got {value!r}")
    value = value.strip()
    if len(value) == 9 and value.startswith('#'):
        alpha, red, green, blue = (int(value[i:i + 2], 16) for i in range(1, 9, 2))
        return (red, green, blue, alpha)
    return ImageColor.getcolor(value, 'RGBA')


def parse_color_safe(value, default: str):
    try:
        return parse_color(value)
    except ValueError:
        print(f"Warning: Invalid color {value!r}, using {default}")
        return parse_color(default)


def parse_date_safe(value, default: str) -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        print(f"Warning: Invalid date {value!r}, using {default}")
        return date.fromisoformat(default)


def parse_view_mode(value) -> ViewMode:
    try:
        return ViewMode(str(value).upper())
    except ValueError:
        print(f"Warning: Invalid calendar_type {value!r}, using MONTH")
        return ViewMode.MONTH


def parse_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    print(f"Warning: Invalid flag {value!r}, using {default}")
    return default


def parse_number(value, default, bounds=None, cast=float):
    """Cast value, falling back to default, then clamp into bounds"""
    try:
        number = cast(value)
        if not math.isfinite(number):
            raise ValueError(f"non-finite number {value!r}")
    except (TypeError, ValueError, OverflowError):
        print(f"Warning: Invalid number {value!r}, using {default}")
        number = cast(default)
    if bounds:
        low, high = bounds
        number = max(low, min(high, number))
    return number


def resolve_palette(settings: Dict[str, Any]) -> Palette:
    def color(key):
        return parse_color_safe(settings.get(key, DEFAULT_SETTINGS[key]), DEFAULT_SETTINGS[key])

    return Palette(
        background=color('bg_color'),
        accent=color('accent_color'),
        future=color('future_color'),
        text=color('text_color'),
        today=color('today_color'),
    )


def resolve_config(settings: Dict[str, Any], today: date,
                   width: Optional[float] = None,
                   height: Optional[float] = None) -> RenderConfig:
    """
    Build a RenderConfig from a settings map.

    Args:
        settings: key-value map as persisted (missing keys use defaults)
        today: the reference date for this render
        width, height: output size; taken from settings when omitted

    Returns:
        RenderConfig with every value validated and clamped
    """
    merged = dict(DEFAULT_SETTINGS)
    merged.update(settings)

    width = width if width is not None else parse_number(
        merged['width'], DEFAULT_SETTINGS['width'], SIZE_RANGE)
    height = height if height is not None else parse_number(
        merged['height'], DEFAULT_SETTINGS['height'], SIZE_RANGE)

    return RenderConfig(
        view_mode=parse_view_mode(merged['calendar_type']),
        reference_date=today,
        viewport_width=float(width),
        viewport_height=float(height),
        birth_date=parse_date_safe(merged['birth_date'], DEFAULT_SETTINGS['birth_date']),
        life_expectancy_years=parse_number(
            merged['life_expectancy'], DEFAULT_SETTINGS['life_expectancy'],
            LIFE_EXPECTANCY_RANGE, int,
        ),
        scale=parse_number(merged['scale'], DEFAULT_SETTINGS['scale'], SCALE_RANGE),
        offset_x=parse_number(merged['offset_x'], DEFAULT_SETTINGS['offset_x'], OFFSET_RANGE),
        offset_y=parse_number(merged['offset_y'], DEFAULT_SETTINGS['offset_y'], OFFSET_RANGE),
        show_title=parse_bool(merged['show_title'], DEFAULT_SETTINGS['show_title']),
        show_stats=parse_bool(merged['show_stats'], DEFAULT_SETTINGS['show_stats']),
        colors=resolve_palette(merged),
    )
