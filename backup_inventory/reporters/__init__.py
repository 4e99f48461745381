"""Reporters that emit finished backup aggregates."""

from .json_reporter import JsonReporter
from .text_reporter import TextReporter

__all__ = ["JsonReporter", "TextReporter"]
