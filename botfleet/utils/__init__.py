"""Utility functions for botfleet.

``setup_log_system`` configures console logging for the process: botfleet's
own loggers and discord.py's share one Rich (or plain) handler.
"""

from .logging_system import setup_log_system  # noqa: F401

__all__ = ["setup_log_system"]
