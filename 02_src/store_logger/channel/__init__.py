"""Diagnostic channel module."""

from .console import SEVERITY_LEVELS, ConsoleChannel, IDiagnosticChannel

__all__ = ["ConsoleChannel", "IDiagnosticChannel", "SEVERITY_LEVELS"]
