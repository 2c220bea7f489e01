"""
Services: concrete collaborators for the presenters.

- TaigaSearchProvider: project search over the Taiga REST API
- Session: persisted current-project selection
"""

from .session import Session
from .taiga_search import TaigaSearchProvider

__all__ = [
    "Session",
    "TaigaSearchProvider",
]
