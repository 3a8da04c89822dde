"""Resource module exports."""

from .git import Git

__all__ = [
    "Git",
]
