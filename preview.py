#!/usr/bin/env python3
"""
Settings Preview
Renders a single preview PNG with the compact preview font sizes.

Usage:
    python3 preview.py --mode LIFE --birth-date 1990-05-17 --output preview.png
"""

import argparse
import sys
from datetime import date
from pathlib import Path

from lifedots import PREVIEW, get_labels, render
from lifedots.backend import draw_plan, measure_bold_width, measure_width
from lifedots.settings import load_settings, resolve_config

# Preview canvas size (phone aspect ratio)
PREVIEW_WIDTH = 540
PREVIEW_HEIGHT = 1200


def build_parser():
    parser = argparse.ArgumentParser(description='Render a LifeDots settings preview')
    parser.add_argument('--config', type=Path, default=None,
                        help='Settings JSON file (defaults to wallpaper_config.json)')
    parser.add_argument('--mode', choices=['MONTH', 'YEAR', 'LIFE'],
                        help='Override calendar_type')
    parser.add_argument('--date', type=date.fromisoformat, default=None,
                        help='Reference date YYYY-MM-DD (defaults to today)')
    parser.add_argument('--birth-date', help='Override birth_date (YYYY-MM-DD)')
    parser.add_argument('--life-expectancy', type=int, help='Override life_expectancy')
    parser.add_argument('--locale', choices=['en', 'ru'], help='Label language')
    parser.add_argument('--width', type=int, default=PREVIEW_WIDTH)
    parser.add_argument('--height', type=int, default=PREVIEW_HEIGHT)
    parser.add_argument('--output', type=Path, default=None,
                        help='PNG path (defaults to preview_<mode>_<date>.png)')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = load_settings(args.config)
    overrides = {
        'calendar_type': args.mode,
        'birth_date': args.birth_date,
        'life_expectancy': args.life_expectancy,
        'locale': args.locale,
    }
    settings.update({k: v for k, v in overrides.items() if v is not None})

    today = args.date or date.today()
    config = resolve_config(settings, today, args.width, args.height)
    plan = render(config, measure_width, get_labels(settings['locale']), PREVIEW,
                  measure_bold_width)
    image = draw_plan(plan, args.width, args.height)

    output = args.output or Path(
        f"preview_{config.view_mode.name.lower()}_{today.strftime('%Y%m%d')}.png"
    )
    image.save(output, 'PNG')
    print(f"Image saved as: {output}")
    print(f"   Size: {image.width}x{image.height} pixels")
    return 0


if __name__ == "__main__":
    sys.exit(main())
