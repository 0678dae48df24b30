import json
from datetime import date

import pytest

from lifedots.models import ViewMode
from lifedots.settings import (DEFAULT_SETTINGS, load_settings, parse_color,
                               parse_color_safe, resolve_config)

TODAY = date(2025, 6, 15)


def test_defaults_resolve():
    config = resolve_config({}, TODAY)
    assert config.view_mode == ViewMode.MONTH
    assert config.reference_date == TODAY
    assert config.birth_date == date(2000, 1, 1)
    assert config.life_expectancy_years == 80
    assert (config.viewport_width, config.viewport_height) == (1080.0, 2400.0)
    assert config.scale == 1.0
    assert (config.offset_x, config.offset_y) == (0.5, 0.5)
    assert config.show_title and config.show_stats
    assert config.colors.background == (0, 0, 0, 255)
    assert config.colors.accent == (76, 175, 80, 255)
    assert config.colors.future == (34, 34, 34, 255)
    assert config.colors.text == (255, 255, 255, 255)


def test_parse_color_formats():
    assert parse_color("#4CAF50") == (76, 175, 80, 255)
    assert parse_color("#fff") == (255, 255, 255, 255)
    assert parse_color("#80FF0000") == (255, 0, 0, 128)
    with pytest.raises(ValueError):
        parse_color("#GGGGGG")


def test_bad_values_fall_back(capsys):
    config = resolve_config({
        'accent_color': 'not-a-color',
        'calendar_type': 'DECADE',
        'birth_date': '2000-13-45',
        'scale': 'huge',
        'show_stats': 'maybe',
    }, TODAY)
    assert config.colors.accent == parse_color(DEFAULT_SETTINGS['accent_color'])
    assert config.view_mode == ViewMode.MONTH
    assert config.birth_date == date(2000, 1, 1)
    assert config.scale == 1.0
    assert config.show_stats is True
    assert "Warning" in capsys.readouterr().out


def test_values_are_clamped():
    config = resolve_config({
        'scale': 5,
        'offset_x': -1,
        'offset_y': 3,
        'life_expectancy': 200,
    }, TODAY)
    assert config.scale == 2.0
    assert (config.offset_x, config.offset_y) == (0.0, 1.0)
    assert config.life_expectancy_years == 120


def test_string_flags_and_lowercase_mode():
    config = resolve_config({'calendar_type': 'life', 'show_title': 'false'}, TODAY, 400, 800)
    assert config.view_mode == ViewMode.LIFE
    assert config.show_title is False
    assert (config.viewport_width, config.viewport_height) == (400.0, 800.0)


def test_parse_color_safe_uses_default(capsys):
    assert parse_color_safe(None, "#000000") == (0, 0, 0, 255)


def test_load_settings_merges_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({'calendar_type': 'YEAR', 'scale': 1.5}))
    settings = load_settings(path)
    assert settings['calendar_type'] == 'YEAR'
    assert settings['scale'] == 1.5
    assert settings['bg_color'] == DEFAULT_SETTINGS['bg_color']


def test_load_settings_missing_or_broken(tmp_path, capsys):
    assert load_settings(tmp_path / "missing.json") == DEFAULT_SETTINGS
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert load_settings(broken) == DEFAULT_SETTINGS
    assert "Could not read settings" in capsys.readouterr().out


def test_non_finite_numbers_fall_back(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text('{"life_expectancy": Infinity, "width": NaN, "scale": -Infinity}')
    config = resolve_config(load_settings(path), TODAY)
    assert config.life_expectancy_years == 80
    assert config.viewport_width == 1080.0
    assert config.scale == 1.0
    assert "Invalid number" in capsys.readouterr().out


def test_viewport_size_is_kept_positive():
    config = resolve_config({'width': -5, 'height': 0}, TODAY)
    assert config.viewport_width >= 1
    assert config.viewport_height >= 1
