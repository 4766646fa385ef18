"""Command-line interface for s2skill.

    s2skill-sync [OPTIONS] [REPO_PATH] [OUTPUT_PATH]
"""

import logging
import sys

import click

from s2skill import __version__
from s2skill.click_command import SkillSyncCommand
from s2skill.config_manager import ConfigManager, IndexMode
from s2skill.exceptions import RepoPathRequiredError, SkillSyncError
from s2skill.modules.interaction_handler import CLIInteractionHandler
from s2skill.modules.progress import ProgressDisplay
from s2skill.sync_driver import SkillSyncDriver, print_summary

logger = logging.getLogger(__name__)


@click.command(
    cls=SkillSyncCommand,
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.argument("repo_path", required=False, type=click.Path(file_okay=False))
@click.argument("output_path", required=False, type=click.Path(file_okay=False))
@click.option(
    "--index-mode",
    type=click.Choice([m.value for m in IndexMode], case_sensitive=False),
    default=None,
    help="generate: render SKILL.md from llms.txt (default). "
    "preserve: keep the hand-maintained SKILL.md; REPO_PATH is required.",
)
@click.option("--config", help="Config file path", type=click.Path())
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__)
@click.pass_context
def main(
    ctx: click.Context,
    repo_path: str | None,
    output_path: str | None,
    index_mode: str | None,
    config: str | None,
    verbose: bool,
) -> None:
    """Generate the React Spectrum S2 agent skill from an upstream checkout.

    Runs the upstream markdown generator in REPO_PATH, filters its llms.txt
    manifest (dropping release notes and per-component testing pages) and
    copies the referenced files into a references/ folder.

    \b
    Defaults:
        generate mode: REPO_PATH and OUTPUT_PATH default to the current
                       directory; files go to OUTPUT_PATH/s2-skill/
        preserve mode: REPO_PATH is required; OUTPUT_PATH defaults to the
                       s2skill project root (the checkout, or the nearest
                       directory with SKILL.md), whose SKILL.md is never
                       touched

    \b
    Examples:
        s2skill-sync                                  # Current directory
        s2skill-sync ~/repos/react-spectrum           # Custom repo
        s2skill-sync ~/repos/react-spectrum /tmp/out  # Custom output
        s2skill-sync --index-mode preserve ~/repos/react-spectrum
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    try:
        sync_config = ConfigManager.resolve(
            repo_path=repo_path,
            output_path=output_path,
            index_mode=index_mode,
            custom_path=config,
        )
    except RepoPathRequiredError as e:
        raise click.UsageError(str(e), ctx=ctx) from e
    except SkillSyncError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    try:
        driver = SkillSyncDriver(
            sync_config,
            interaction_handler=CLIInteractionHandler(),
            progress=ProgressDisplay(),
        )
        summary = driver.run()

        if summary.cancelled:
            click.echo("Cancelled. Existing folder preserved.")
            return

        click.secho(f"\nSuccess! {sync_config.skill_dir.name} folder updated.", fg="green")
        print_summary(summary)

    except SkillSyncError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
    except (KeyboardInterrupt, click.Abort):
        click.echo("\nCancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
