"""In-memory email archive indexing.

This package holds the record store and the frequency indexes derived from
it once at startup.
"""

from .frequency import FrequencyIndexes, build_counted_list, build_counted_map
from .store import DocumentStore

__all__ = ["DocumentStore", "FrequencyIndexes", "build_counted_list", "build_counted_map"]
