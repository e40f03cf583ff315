"""Printer module."""

from .printer import IPrinter, StructuredPrinter

__all__ = ["IPrinter", "StructuredPrinter"]
