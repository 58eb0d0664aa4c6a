"""
Configuration
=============
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: Canvas sizes, frame rate and tutor settings live in one
   place instead of being scattered across views and controllers.
2. Deployment: Secrets (the tutor API key) and the log level come from the
   environment, so nothing sensitive is hardcoded.

Exports:
    FIELD_CANVAS_SIZE (tuple): (width, height) of the wave field grids.
    INSPECTOR_CANVAS_SIZE (tuple): (width, height) of the hologram inspector.
    FRAME_INTERVAL_MS (int): Delay between animation frames.
    TUTOR_MODEL (str): Generative model used by the tutor.
"""
import logging
import os
from typing import Optional

FIELD_CANVAS_SIZE: tuple[int, int] = (600, 320)
INSPECTOR_CANVAS_SIZE: tuple[int, int] = (600, 150)

# Film strip placement inside the inspector canvas
STRIP_TOP: int = 20
STRIP_HEIGHT: int = 50

# ~60 fps
FRAME_INTERVAL_MS: int = 16

TUTOR_MODEL: str = "gemini-2.5-flash"
TUTOR_TEMPERATURE: float = 0.7
TUTOR_HISTORY_WINDOW: int = 10

API_KEY_ENV_VARS: tuple[str, ...] = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")
LOG_LEVEL_ENV_VAR: str = "HOLOLEARN_LOG_LEVEL"


def get_api_key() -> Optional[str]:
    """
    First non-empty API key found in the environment, or None.
    """
    for name in API_KEY_ENV_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


def get_log_level() -> int:
    """Log level from the environment (name or number), INFO by default."""
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return logging.INFO
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.INFO
