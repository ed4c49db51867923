"""
League data sources.

Provides a unified interface for fetching standings and games.
"""

from .base import (
    DataSource,
    DataNotFoundError,
    DataSourceError
)
from .nhl import NHLAdapter


def get_data_source(name: str = "nhl") -> DataSource:
    """
    Get the data source with the given name.

    Args:
        name: Data source name ('nhl')

    Returns:
        Data source instance

    Raises:
        ValueError: If the data source is not supported
    """
    if name.lower() == "nhl":
        return NHLAdapter()

    raise ValueError(f"Unsupported data source: {name}. Supported: nhl")


__all__ = [
    "DataSource",
    "DataNotFoundError",
    "DataSourceError",
    "NHLAdapter",
    "get_data_source",
]
