from __future__ import annotations

import logging

import typer

from acs_common.errors import ACSError, ConfigurationError
from acs_ui.wiring.dependencies import UIContext

logger = logging.getLogger(__name__)


def fail(ctx: UIContext, exc: ACSError) -> typer.Exit:
    """Report ``exc`` through the presenter and build the matching exit.

    Configuration problems exit with status 2, other failures with 1.
    """
    logger.debug("Command failed: %s", exc.to_dict())
    ctx.ui.present.error(str(exc))
    return typer.Exit(2 if isinstance(exc, ConfigurationError) else 1)
