"""
Command-line interface for action-sheet.

Shows the demo sheet and inspects the grid planned for a number of items.
"""

from __future__ import annotations

import logging

import typer

from acs_ui.cli.commands.demo import register_demo_command
from acs_ui.cli.commands.plan import register_plan_command
from acs_ui.wiring.dependencies import UIContext, configure_logging

logger = logging.getLogger(__name__)


def create_app(ctx: UIContext) -> typer.Typer:
    """Build the root Typer app, wired to the given context."""
    app = typer.Typer(
        help="Present bottom action sheets in the terminal.",
        no_args_is_help=True,
    )

    @app.callback()
    def entry(
        headless: bool = typer.Option(
            False,
            "--headless",
            help="Force headless output (useful in CI).",
        ),
        debug: bool = typer.Option(
            False,
            "--debug",
            help="Enable debug logging.",
        ),
    ) -> None:
        """Global entry point handling interactive vs headless modes."""
        configure_logging(force=True, debug=debug)
        if headless:
            ctx.headless = True
        logger.debug("CLI started (headless=%s)", ctx.settings.headless)

    register_demo_command(app, ctx)
    register_plan_command(app, ctx)
    return app


ctx_store = UIContext()
app = create_app(ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
