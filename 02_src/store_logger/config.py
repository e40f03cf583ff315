"""Project-level defaults and environment settings."""

import os
import sys
from dataclasses import dataclass
from typing import TextIO

# Action type dispatched by the store on bootstrap; never logged.
INIT_ACTION = "@ngrx/store/init"

EMPTY_STATE = "(Empty)"
LOG_END_MARKER = "—— log end ——"

TITLE_COLOR: str | None = None
PREV_STATE_COLOR = "#9E9E9E"
ACTION_COLOR = "#03A9F4"
NEXT_STATE_COLOR = "#4CAF50"
ERROR_COLOR = "#F20404"

DEFAULT_POSTER_TIMEOUT = 5.0


@dataclass
class Settings:
    """Runtime settings read from the environment."""

    log_level: str = "INFO"
    log_file: str | None = None
    log_format: str = "plain"
    poster_url: str | None = None
    poster_timeout: float = DEFAULT_POSTER_TIMEOUT
    no_color: bool = False


def load_settings() -> Settings:
    """Build Settings from LOG_* / NO_COLOR environment variables."""
    timeout = os.getenv("LOG_POSTER_TIMEOUT")
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or None,
        log_format=os.getenv("LOG_FORMAT", "plain").lower(),
        poster_url=os.getenv("LOG_POSTER_URL") or None,
        poster_timeout=float(timeout) if timeout else DEFAULT_POSTER_TIMEOUT,
        no_color=bool(os.getenv("NO_COLOR")),
    )


def is_legacy_user_agent(user_agent: str | None) -> bool:
    """Old and new Internet Explorer agents can't render styled output."""
    if not user_agent:
        return False
    return "MSIE " in user_agent or "Trident/" in user_agent


def detect_color_support(
    user_agent: str | None = None,
    stream: TextIO | None = None,
) -> bool:
    """
    Decide whether color hints should be rendered.

    Args:
        user_agent: Client user agent, if output ends up in a browser console.
        stream: Output stream to check for a tty. Defaults to sys.stdout.

    Returns:
        False for legacy agents, when NO_COLOR is set, or when the
        stream is not a terminal.
    """
    if is_legacy_user_agent(user_agent):
        return False
    if os.getenv("NO_COLOR"):
        return False

    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
