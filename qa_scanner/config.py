import copy
import json

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0 Safari/537.36"
)

# Only fetching, rendering and diagnostics are configurable; check thresholds are fixed.
DEFAULT_CONFIG = {
    "Global": {
        "request_timeout": 10,
        "user_agent": DEFAULT_USER_AGENT,
        "accept_language": "en-US,en;q=0.8",
        "http_retries_total": 2,
        "http_backoff_factor": 0.2,
        "http_status_forcelist": [429, 500, 502, 503, 504],
        "debug": False,
    },
    "Render": {
        "viewport_width": 390,
        "viewport_height": 844,
        "timeout": 20,
        "wait_until": "networkidle",
    },
}


def merge_config(base: dict, overrides: dict) -> dict:
    """Shallow-merge overrides into a copy of base; nested sections are updated key by key."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path=None) -> dict:
    current_config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return current_config
    try:
        with open(path, "r") as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        print(f"Warning: Config file {path} not found. Using default settings.")
        return current_config
    except json.JSONDecodeError:
        print(f"Warning: Error decoding JSON from {path}. Using default settings.")
        return current_config
    if not isinstance(custom_config, dict):
        print(f"Warning: Config file {path} must contain a JSON object. Using default settings.")
        return current_config
    print(f"Loaded custom configuration from {path}")
    return merge_config(current_config, custom_config)
