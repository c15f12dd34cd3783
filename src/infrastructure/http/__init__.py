"""HTTP infrastructure module."""

from src.infrastructure.http.fetcher import SeriesFetcher

__all__ = ["SeriesFetcher"]
