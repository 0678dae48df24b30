#!/usr/bin/env python3
"""
Wallpaper Service
Continuously polls the settings and refreshes the wallpaper image
"""

import argparse
import hashlib
import os
import signal
import sys
import time
import traceback
from datetime import date, datetime
from pathlib import Path

from lifedots import WALLPAPER, get_labels, render
from lifedots.backend import draw_plan, measure_bold_width, measure_width
from lifedots.settings import CONFIG_FILE, load_settings, resolve_config
from settings_client import merge_remote_settings

# Polling configuration
POLL_INTERVAL = int(os.getenv('LIFEDOTS_POLL_INTERVAL', '60'))  # Default: 60 seconds
OUTPUT_FILE = Path(os.getenv('LIFEDOTS_OUTPUT', 'wallpaper.png'))

# Global state
running = True
last_key = None
last_image_hash = None


def signal_handler(sig, frame):
    """Handle shutdown signals gracefully"""
    global running
    print("\nShutting down...")
    running = False


def log(message):
    print(f"[{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}] {message}")


def refresh_key(settings, today):
    """Everything a redraw depends on: the settings snapshot and the date"""
    return (tuple(sorted((k, repr(v)) for k, v in settings.items())), today)


def should_refresh(current_key, previous_key):
    """Redraw on first run, on any settings change and when the day rolls over"""
    return previous_key is None or current_key != previous_key


def render_wallpaper(settings, today):
    """Render the settings snapshot for today into a PIL Image"""
    config = resolve_config(settings, today)
    labels = get_labels(settings.get('locale', 'en'))
    plan = render(config, measure_width, labels, WALLPAPER, measure_bold_width)
    return draw_plan(plan, config.viewport_width, config.viewport_height)


def update_wallpaper(config_path=CONFIG_FILE, output=OUTPUT_FILE, today=None):
    """
    Reload settings and rewrite the wallpaper if needed.

    Returns:
        True if a new image was written
    """
    global last_key, last_image_hash

    try:
        settings = merge_remote_settings(load_settings(config_path))
        today = today or date.today()

        key = refresh_key(settings, today)
        if not should_refresh(key, last_key):
            return False

        log(f"Rendering {settings.get('calendar_type')} view for {today.isoformat()}...")
        image = render_wallpaper(settings, today)

        current_hash = hashlib.md5(image.tobytes()).hexdigest()
        last_key = key
        if current_hash == last_image_hash:
            print("  Content unchanged, skipping write")
            return False

        image.save(output, 'PNG')
        last_image_hash = current_hash
        print(f"  Wallpaper saved as: {output} ({image.width}x{image.height})")
        return True

    except Exception as e:
        print(f"  Error updating wallpaper: {e}")
        traceback.print_exc()
        return False


def main(argv=None):
    """Main service loop"""
    parser = argparse.ArgumentParser(description='LifeDots wallpaper refresh service')
    parser.add_argument('--config', type=Path, default=CONFIG_FILE,
                        help='Settings JSON file')
    parser.add_argument('--output', type=Path, default=OUTPUT_FILE,
                        help='Wallpaper PNG to write')
    parser.add_argument('--interval', type=int, default=POLL_INTERVAL,
                        help='Seconds between settings checks')
    parser.add_argument('--once', action='store_true',
                        help='Render a single wallpaper and exit')
    args = parser.parse_args(argv)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    print("=" * 50)
    print("Wallpaper Service Starting...")
    print(f"Settings: {args.config}")
    print(f"Output: {args.output}")
    print(f"Poll Interval: {args.interval} seconds")
    print("=" * 50)

    print("\nPerforming initial update...")
    update_wallpaper(args.config, args.output)
    if args.once:
        return 0

    print(f"\nStarting polling loop (every {args.interval} seconds)...")
    print("Press Ctrl+C to stop\n")

    while running:
        try:
            time.sleep(args.interval)
            if running:  # Check again after sleep
                update_wallpaper(args.config, args.output)
        except KeyboardInterrupt:
            break

    print("Service stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
