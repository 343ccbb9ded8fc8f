# Re-export primary service layer entry points for convenience.
from .content import ContentService
from .filters import build_like_filter, page_bounds

__all__ = [
    "ContentService",
    "build_like_filter",
    "page_bounds",
]
