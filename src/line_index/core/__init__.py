"""Line index core package."""

from .indexer import SimpleLineIndexer, RunResult

__all__ = ["SimpleLineIndexer", "RunResult"]
