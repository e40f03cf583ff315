"""Middleware module."""

from .middleware import Reducer, StoreLogger, store_logger

__all__ = ["Reducer", "StoreLogger", "store_logger"]
