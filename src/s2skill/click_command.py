"""Custom Click command with automatic help display on usage errors.

Usage errors (missing or bad arguments) print the error and the command
help, then exit with status 1 instead of Click's default of 2.
"""

from typing import Any

import click

USAGE_EXIT_CODE = 1


class SkillSyncCommand(click.Command):
    """Click command that auto-displays help on usage errors."""

    def _exit_with_help(self, ctx: click.Context, error: click.UsageError) -> None:
        click.echo(f"Error: {error.format_message()}", err=True)
        error_ctx = error.ctx if error.ctx else ctx
        click.echo("", err=True)
        click.echo(error_ctx.get_help(), err=True)
        # ctx.exit() keeps Click's testing mode working
        error_ctx.exit(USAGE_EXIT_CODE)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Override to show help when arguments cannot be parsed."""
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            self._exit_with_help(ctx, e)
            return []  # Explicit return for code clarity (never reached)

    def invoke(self, ctx: click.Context) -> Any:
        """Handle usage errors raised by the command callback the same way."""
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            self._exit_with_help(ctx, e)
            return None  # Explicit return for code clarity (never reached)
