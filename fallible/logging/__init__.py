"""Helpers to report failures at the boundaries of an application."""

from ._log_failures import log_failures

__all__ = ["log_failures"]
