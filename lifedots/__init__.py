"""
LifeDots calendar dot-grid renderer
"""

from .engine import render
from .labels import ENGLISH, RUSSIAN, get_labels
from .models import (PREVIEW, WALLPAPER, Cell, GridMetrics, Labels, Layout,
                     Palette, RenderConfig, TemporalState, TypeScale, ViewMode)
from .plan import Circle, DrawPlan, TextRun, Transform
from .views import get_view, list_views

__all__ = [
    'render', 'get_view', 'list_views', 'get_labels',
    'ENGLISH', 'RUSSIAN', 'PREVIEW', 'WALLPAPER',
    'Cell', 'GridMetrics', 'Labels', 'Layout', 'Palette', 'RenderConfig',
    'TemporalState', 'TypeScale', 'ViewMode',
    'Circle', 'DrawPlan', 'TextRun', 'Transform',
]
