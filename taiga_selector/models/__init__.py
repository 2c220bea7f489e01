"""Domain models."""

from .projects import ProjectInSearch

__all__ = ["ProjectInSearch"]
