"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: Environment variables, optionally from a .env file at the project root.
- Outputs: Constants (backend settings, UI strings, colors, logging options).
- Side effects: load_dotenv() populates os.environ at import (existing variables win).
- Thread-safety: N/A (read-only constants).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")


def _env_bool(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise SystemExit(f"{name} must be a number of seconds, got {raw!r} (see .env.example)") from None
    if value <= 0:
        raise SystemExit(f"{name} must be greater than 0, got {raw!r} (see .env.example)")
    return value


# Hosted table (Supabase REST endpoint: <SUPABASE_URL>/rest/v1/<SHOPS_TABLE>)
SUPABASE_URL = os.getenv("SUPABASE_URL", "").strip()
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "").strip()
SHOPS_TABLE = os.getenv("SHOPS_TABLE", "Shops")
REQUEST_TIMEOUT_SEC = _env_float("REQUEST_TIMEOUT_SEC", 10.0)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENABLE_FILE_LOGGING = _env_bool("ENABLE_FILE_LOGGING", False)
LOG_DIR = Path(os.getenv("LOG_DIR", str(PROJECT_ROOT / "logs")))

# Desktop notifications (plyer) for failures that have no blocking dialog
ENABLE_NOTIFICATIONS = _env_bool("ENABLE_NOTIFICATIONS", True)
NOTIFICATION_TIMEOUT_SEC = 5

# Keys that submit the form (Tk keysyms plus the generic name)
CONFIRM_KEYS = ("Return", "KP_Enter", "Enter")

APP_TITLE = "Shop Color"
EMPTY_TEXT = "No shops yet. Add one above!"
LOADING_TEXT = "Loading..."
VALIDATION_NOTICE = "Please enter both name and color"
ADD_FAILED_NOTICE = "Failed to add shop. Check the log for details."

# Swatch shown when Tk cannot render the stored color value
FALLBACK_SWATCH = "#9e9e9e"
SWATCH_SIZE = 16
DELETE_LABEL = "Delete"
