"""Diagnostic channel backed by the standard logging module."""

import logging
from typing import Any, Protocol

from ..errors import UnknownSeverityError
from ..formatting import ansi_color
from ..logging_config import get_logger

SEVERITY_LEVELS = {
    "debug": logging.DEBUG,
    "log": logging.INFO,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

logger = get_logger(__name__)

_MISSING = object()


class IDiagnosticChannel(Protocol):
    """Grouped, leveled output. Mirrors a browser console."""

    def group(self, title: str, color: str | None = None) -> None:
        """Open an expanded group."""
        ...

    def group_collapsed(self, title: str, color: str | None = None) -> None:
        """Open a collapsed group."""
        ...

    def group_end(self) -> None:
        """Close the innermost group."""
        ...

    def print(
        self,
        severity: str,
        label: str,
        value: Any = _MISSING,
        color: str | None = None,
    ) -> None:
        """Print a labelled value at the given severity."""
        ...


class ConsoleChannel:
    """Writes trace groups to a logger, indenting group contents."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        colorize: bool = True,
        indent: str = "  ",
    ):
        self._logger = logger or get_logger("store_logger.console")
        self._colorize = colorize
        self._indent = indent
        self._depth = 0
        self._bad_colors: set[str] = set()

    @property
    def depth(self) -> int:
        """Number of currently open groups."""
        return self._depth

    def group(self, title: str, color: str | None = None) -> None:
        self._open(title, color, collapsed=False)

    def group_collapsed(self, title: str, color: str | None = None) -> None:
        self._open(title, color, collapsed=True)

    def group_end(self) -> None:
        if self._depth == 0:
            raise RuntimeError("group_end() called without an open group")
        self._depth -= 1

    def print(
        self,
        severity: str,
        label: str,
        value: Any = _MISSING,
        color: str | None = None,
    ) -> None:
        levelno = self._levelno(severity)
        text = self._paint(label, color, bold=True)
        context = {"label": label, "severity": severity, "depth": self._depth}

        if value is _MISSING:
            self._logger.log(
                levelno, "%s%s", self._prefix(), text, extra={"context": context}
            )
            return

        context["value"] = value
        self._logger.log(
            levelno,
            "%s%s %r",
            self._prefix(),
            text,
            value,
            extra={"context": context},
        )

    def _open(self, title: str, color: str | None, collapsed: bool) -> None:
        marker = "▸" if collapsed else "▾"
        self._logger.info(
            "%s%s %s",
            self._prefix(),
            marker,
            self._paint(title, color),
            extra={"context": {"group": title, "collapsed": collapsed}},
        )
        self._depth += 1

    def _prefix(self) -> str:
        return self._indent * self._depth

    def _paint(self, text: str, color: str | None, bold: bool = False) -> str:
        if not self._colorize or not color:
            return text
        try:
            return ansi_color(text, color, bold=bold)
        except ValueError as e:
            # Unrenderable hints (CSS names etc.) only lose the color.
            if color not in self._bad_colors:
                self._bad_colors.add(color)
                logger.warning("Printing without color: %s", e)
            return text

    @staticmethod
    def _levelno(severity: str) -> int:
        try:
            return SEVERITY_LEVELS[str(severity).lower()]
        except KeyError:
            raise UnknownSeverityError(severity) from None
