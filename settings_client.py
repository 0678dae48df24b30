#!/usr/bin/env python3
"""
Remote Settings Client
Fetches the wallpaper settings map from an HTTP endpoint
"""

import os

import requests

REQUEST_TIMEOUT = int(os.getenv('LIFEDOTS_REQUEST_TIMEOUT', '10'))


def fetch_settings(settings_url):
    """
    Fetch the settings key-value map from settings_url.

    Args:
        settings_url: URL returning a JSON object of settings, or a JSON
            object with the map under a 'settings' key

    Returns:
        dict of settings, or None on error
    """
    try:
        response = requests.get(settings_url, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        print(f"Error fetching settings: {e}")
        if getattr(e, 'response', None) is not None:
            try:
                error_data = e.response.json()
                print(f"Error details: {error_data}")
            except ValueError:
                print(f"Response status: {e.response.status_code}")
        return None
    except ValueError as e:
        print(f"Error decoding settings: {e}")
        return None

    if isinstance(data, dict) and isinstance(data.get('settings'), dict):
        data = data['settings']
    if not isinstance(data, dict):
        print("Error: Settings response is not a JSON object")
        return None
    return data


def merge_remote_settings(local_settings):
    """
    Overlay remote settings on local ones when settings_url is configured.

    Remote failures keep the local settings.
    """
    settings_url = local_settings.get('settings_url') or ''
    if not isinstance(settings_url, str):
        print(f"  Warning: Ignoring settings_url {settings_url!r}, expected a URL string")
        return local_settings
    settings_url = settings_url.strip()
    if not settings_url:
        return local_settings

    remote = fetch_settings(settings_url)
    if remote is None:
        print("  Warning: Using local settings only")
        return local_settings

    merged = dict(local_settings)
    merged.update(remote)
    return merged
