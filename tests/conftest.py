from datetime import date

import pytest

from lifedots.models import RenderConfig, ViewMode


def fixed_width(text, font_size):
    """Ten pixels per character regardless of size"""
    return 10.0 * len(text)


@pytest.fixture
def measure():
    return fixed_width


@pytest.fixture
def make_config():
    def _make(view_mode=ViewMode.MONTH, reference_date=date(2025, 6, 15), **overrides):
        values = dict(
            view_mode=view_mode,
            reference_date=reference_date,
            viewport_width=1080.0,
            viewport_height=2400.0,
        )
        values.update(overrides)
        return RenderConfig(**values)
    return _make
