"""Utility helpers."""

from .polling import retry_until_success, wait_until

__all__ = ["wait_until", "retry_until_success"]
