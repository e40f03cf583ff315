"""Time and title formatting helpers."""

import time
from datetime import datetime
from typing import Any


def now_ms() -> float:
    """Monotonic timestamp in milliseconds."""
    return time.perf_counter() * 1000.0


def format_time(moment: datetime) -> str:
    """Render a wall-clock time as '@ HH:MM:SS.mmm'."""
    return (
        f"@ {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}"
    )


def build_title(
    action_type: Any,
    started_time: datetime,
    took: float,
    timestamp: bool = True,
    duration: bool = True,
) -> str:
    """Group title for one transition, e.g. 'action @ 10:00:00.000 INC (in 0.01 ms)'."""
    formatted_time = format_time(started_time) if timestamp else ""
    elapsed = f"(in {took:.2f} ms)" if duration else ""
    return f"action {formatted_time} {action_type} {elapsed}"


def ansi_color(text: str, color: str | None, bold: bool = False) -> str:
    """Wrap text in a 24-bit ANSI color escape for a '#RRGGBB' hint."""
    if not color:
        return text

    hex_value = color.lstrip("#")
    if len(hex_value) == 3:
        hex_value = "".join(c * 2 for c in hex_value)
    if len(hex_value) != 6:
        raise ValueError(f"Unsupported color hint: {color!r}")

    red, green, blue = (int(hex_value[i : i + 2], 16) for i in (0, 2, 4))
    prefix = "\x1b[1m" if bold else ""
    return f"{prefix}\x1b[38;2;{red};{green};{blue}m{text}\x1b[0m"
