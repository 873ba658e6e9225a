"""History module."""

from .fetcher import HistoryFetcher, IHistoryFetcher

__all__ = ["HistoryFetcher", "IHistoryFetcher"]
