"""Core application for helmsafe."""

from .application import HelmSafe, create_application

__all__ = [
    "HelmSafe",
    "create_application",
]
