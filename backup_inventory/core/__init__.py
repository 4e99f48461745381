"""Core inventory functionality."""

from .aggregator import BackupAggregator, aggregate
from .classifier import classify, is_immutable
from .inventory import InventoryRunner
from .models import (
    ZERO_TIME,
    BackupAggregate,
    BackupRoot,
    ErrorPolicy,
    FileClass,
    FileEntry,
    RemoteEntry,
    StepError,
    WalkStep,
)
from .protocols import AggregateSink, RemoteLister
from .walker import TreeWalker

__all__ = [
    "BackupAggregator",
    "aggregate",
    "classify",
    "is_immutable",
    "InventoryRunner",
    "ZERO_TIME",
    "BackupAggregate",
    "BackupRoot",
    "ErrorPolicy",
    "FileClass",
    "FileEntry",
    "RemoteEntry",
    "StepError",
    "WalkStep",
    "AggregateSink",
    "RemoteLister",
    "TreeWalker",
]
