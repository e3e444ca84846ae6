"""Public API surface for acs_common."""

from acs_common.errors import ACSError, ConfigurationError, SheetHostError
from acs_common.logging import configure_logging

__all__ = ["ACSError", "ConfigurationError", "SheetHostError", "configure_logging"]
