"""Poster module."""

from .http import HttpLogPoster
from .poster import ILogPoster, RemotePosterAdapter

__all__ = ["HttpLogPoster", "ILogPoster", "RemotePosterAdapter"]
