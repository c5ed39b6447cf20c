"""Greeting normalization.

Maps an optional name to the final greeting text. The function is pure:
the same input always produces the same message, so it is safe to call
from any number of concurrent requests.
"""

from typing import Any, Optional

BASE_GREETING = "Hello world!"


def _is_absent(name: Any) -> bool:
    """Return True for the "no real name" markers: ``None`` and ``""``."""
    return name is None or (isinstance(name, str) and name == "")


def get_greeting(name: Optional[Any] = None) -> str:
    """Generate a greeting message, optionally personalized with a name.

    Args:
        name: The name of the person sending the greeting. ``None`` or an
            empty string yields the plain greeting. Any other value,
            including ``0``, ``False`` and whitespace-only text, is
            rendered with ``str()`` and appended verbatim.

    Returns:
        ``"Hello world!"`` when no name is provided, otherwise
        ``"Hello world! From <name>"``.

    Examples:
        >>> get_greeting()
        'Hello world!'
        >>> get_greeting("Alice")
        'Hello world! From Alice'
    """
    if _is_absent(name):
        return BASE_GREETING

    return f"{BASE_GREETING} From {name}"
