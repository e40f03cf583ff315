"""Exceptions raised by store_logger."""


class StoreLoggerError(Exception):
    """Base class for all store_logger errors."""


class ConfigurationError(StoreLoggerError):
    """Logger options could not be built."""


class UnknownSeverityError(StoreLoggerError):
    """A diagnostic channel was asked to print at a severity it doesn't know."""

    def __init__(self, severity):
        super().__init__(f"Unknown severity: {severity!r}")
        self.severity = severity


class LogPostError(StoreLoggerError):
    """Delivering a log object to the remote collector failed."""
