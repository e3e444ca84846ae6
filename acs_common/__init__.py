"""Shared helpers for action-sheet."""

from acs_common.api import ACSError, ConfigurationError, SheetHostError, configure_logging

__all__ = ["configure_logging", "ACSError", "ConfigurationError", "SheetHostError"]
