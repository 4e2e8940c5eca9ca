"""Helper utility functions for helmsafe."""

from typing import Any

TRUTHY_VALUES = {"1", "true", "yes", "on"}


def is_truthy(value: Any) -> bool:
    """Interpret an environment-style value ("1", "true", "yes", "on") as a boolean."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_VALUES
