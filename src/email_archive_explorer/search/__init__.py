"""Query operations over the loaded archive."""

from .filters import EmailFilters, filter_emails, normalize_filter_values
from .person import search_person

__all__ = ["EmailFilters", "filter_emails", "normalize_filter_values", "search_person"]
