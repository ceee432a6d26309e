"""Utility modules for ifupdown-interfaces.

Provides:
- logger: get_logger for logging
"""

from ifupdown_interfaces.utils.logger import get_logger

__all__ = ["get_logger"]
