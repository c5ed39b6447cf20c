"""Greeting message generation."""

from greeting.normalizer import BASE_GREETING, get_greeting

__all__ = [
    "BASE_GREETING",
    "get_greeting",
]
