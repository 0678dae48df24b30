#!/usr/bin/env python3
"""
Simple View Registry
Automatically discovers and loads view modules from view_*.py files
"""

import importlib
import os
from types import ModuleType
from typing import Dict, List, Optional

from .models import ViewMode

# View registry: {view_mode: view_module}
VIEWS: Dict[ViewMode, ModuleType] = {}

# Every view module provides these
VIEW_CONTRACT = ('MODE', 'partition', 'layout', 'progress', 'title', 'stats_labels')


def load_views():
    """Automatically discover and load all view_*.py files"""
    views_dir = os.path.dirname(os.path.abspath(__file__))

    for filename in sorted(os.listdir(views_dir)):
        if not (filename.startswith('view_') and filename.endswith('.py')):
            continue

        module_name = filename[:-3]
        try:
            module = importlib.import_module(f"{__package__}.{module_name}")
        except Exception as e:
            print(f"Warning: Failed to load {filename}: {e}")
            continue

        missing = [name for name in VIEW_CONTRACT if not hasattr(module, name)]
        if missing:
            print(f"Warning: {filename} found but missing {', '.join(missing)}")
            continue

        VIEWS[module.MODE] = module


def get_view(mode: ViewMode) -> Optional[ModuleType]:
    """Get view module for a view mode"""
    return VIEWS.get(mode)


def list_views() -> List[ViewMode]:
    """List all available view modes"""
    return list(VIEWS.keys())


# Auto-load on import
load_views()
