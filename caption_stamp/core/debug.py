"""Debug output toggled by environment variable."""

import os
import sys

DEBUG_ENV_VAR = "CAPTION_STAMP_DEBUG"


def _is_debug_mode() -> bool:
    """Check if CAPTION_STAMP_DEBUG is set to a truthy value (1/true/yes)."""
    return os.getenv(DEBUG_ENV_VAR, "").strip().lower() in ("1", "true", "yes")


def debug_print(*args: object, **kwargs: object) -> None:
    """Print to stderr only when debug mode is enabled."""
    if _is_debug_mode():
        kwargs.setdefault("file", sys.stderr)
        print(*args, **kwargs)  # type: ignore[call-overload]
