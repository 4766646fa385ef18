"""Skill synchronization driver.

Runs one end-to-end sync: validate the upstream checkout, run the markdown
generator, confirm overwriting an existing references folder, filter the
llms.txt manifest, copy the selected files and, in generate mode, render
SKILL.md.

Every step is sequential and blocking. Fatal conditions raise a
SkillSyncError subclass; a missing individual source file only produces a
warning.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.table import Table

from s2skill.config_manager import SyncConfig
from s2skill.exceptions import GeneratorFailedError, SyncIOError
from s2skill.modules.generator_runner import GeneratorRunner
from s2skill.modules.index_renderer import render_skill_index
from s2skill.modules.interaction_handler import CLIInteractionHandler, InteractionHandler
from s2skill.modules.manifest_parser import (
    DocEntry,
    iter_manifest_lines,
    parse_manifest,
    partition_entries,
)
from s2skill.modules.progress import ProgressDisplay

logger = logging.getLogger(__name__)


@dataclass
class SyncSummary:
    """Result of a sync run."""

    skill_dir: Path
    references_dir: Path
    entries: list[DocEntry] = field(default_factory=list)
    copied: int = 0
    missing_files: list[str] = field(default_factory=list)
    index_path: Path | None = None
    cancelled: bool = False

    @property
    def components(self) -> int:
        return len(partition_entries(self.entries)[0])

    @property
    def guides(self) -> int:
        return len(partition_entries(self.entries)[1])


class SkillSyncDriver:
    """Orchestrate a skill synchronization run.

    Example:
        >>> config = ConfigManager.resolve(repo_path="~/repos/react-spectrum")
        >>> summary = SkillSyncDriver(config).run()
        >>> print(f"Copied {summary.copied} files")
    """

    def __init__(
        self,
        config: SyncConfig,
        interaction_handler: InteractionHandler | None = None,
        progress: ProgressDisplay | None = None,
    ):
        self.config = config
        self.interaction_handler = interaction_handler or CLIInteractionHandler()
        self.progress = progress or ProgressDisplay()

    def run(self) -> SyncSummary:
        """Run all sync steps in order.

        Returns:
            SyncSummary; cancelled is True when the operator declined to
            overwrite the existing references folder

        Raises:
            MissingDependencyError: Generator script not found
            GeneratorFailedError: Generator exited non-zero
            MissingOutputError: Generated directory not found
            SyncIOError: Manifest, copy or index I/O failed
        """
        config = self.config
        summary = SyncSummary(skill_dir=config.skill_dir, references_dir=config.references_dir)

        GeneratorRunner.check_source(config.generator_script_path)

        self.progress.start_operation(f"Running {config.generator_script_path.name}")
        self.progress.update(f"From: {config.repo_path}")
        try:
            GeneratorRunner.run(config.generator_command, config.repo_path)
        except GeneratorFailedError:
            self.progress.complete(success=False)
            raise
        self.progress.complete(message="Generator finished")

        GeneratorRunner.check_output(config.source_dir)
        self.progress.update(f"Found generated files at: {config.source_dir}")

        if not self.prepare_destination():
            summary.cancelled = True
            return summary

        text = self.read_manifest()
        summary.entries = self.filter_entries(text)

        summary.copied, summary.missing_files = self.copy_files(summary.entries)

        if config.generates_index:
            summary.index_path = self.write_index(summary.entries)
        else:
            logger.debug(f"Index mode {config.index_mode.value}: leaving {config.index_path} as-is")

        return summary

    def overwrite_targets(self) -> list[Path]:
        """Existing paths this run would replace.

        The references folder is always replaced. SKILL.md is only replaced
        in generate mode.
        """
        candidates = [self.config.references_dir]
        if self.config.generates_index:
            candidates.append(self.config.index_path)
        return [path for path in candidates if path.exists()]

    def prepare_destination(self) -> bool:
        """Create the references folder, asking before replacing existing output.

        Returns:
            False if the operator declined, True once the folder is ready
        """
        references_dir = self.config.references_dir
        targets = self.overwrite_targets()

        if targets:
            labels = [f"{p.name} folder" if p.is_dir() else p.name for p in targets]
            for label, path in zip(labels, targets):
                self.interaction_handler.show_warning(f"{label} already exists at: {path}")
            if not self.interaction_handler.confirm(f"Overwrite {' and '.join(labels)}?"):
                logger.debug("Overwrite declined, leaving destination untouched")
                return False

        if references_dir.exists():
            self.interaction_handler.show_info("Removing existing folder...")
            try:
                shutil.rmtree(references_dir)
            except OSError as e:
                raise SyncIOError(f"Error removing {references_dir}: {e}") from e

        self.progress.update(f"Creating skill structure at: {self.config.skill_dir}")
        try:
            references_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SyncIOError(f"Error creating {references_dir}: {e}") from e
        return True

    def read_manifest(self) -> str:
        """Read llms.txt from the generated directory."""
        manifest_path = self.config.manifest_path
        self.progress.update(f"Reading {manifest_path.name}...")
        try:
            return manifest_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SyncIOError(f"Error reading {manifest_path.name}: {e}") from e

    def filter_entries(self, text: str) -> list[DocEntry]:
        """Parse the manifest, warning when it lists nothing at all."""
        if not any(True for _ in iter_manifest_lines(text)):
            self.interaction_handler.show_warning(
                f"No entries parsed from {self.config.manifest_name}"
            )
        entries = parse_manifest(text)
        logger.debug(f"Manifest yielded {len(entries)} entries")
        return entries

    def copy_files(self, entries: list[DocEntry]) -> tuple[int, list[str]]:
        """Copy each entry's markdown file into the references folder.

        Returns:
            (number of files copied, filenames missing from the source)

        Raises:
            SyncIOError: If copying an existing file fails
        """
        source_dir = self.config.source_dir
        references_dir = self.config.references_dir

        self.progress.start_operation(f"Copying {len(entries)} reference files")
        copied = 0
        missing: list[str] = []

        for entry in entries:
            src = source_dir / entry.filename
            if not src.is_file():
                missing.append(entry.filename)
                self.interaction_handler.show_warning(f"File not found: {entry.filename}")
                continue

            try:
                shutil.copyfile(src, references_dir / entry.filename)
            except OSError as e:
                self.progress.complete(success=False)
                raise SyncIOError(f"Error copying {entry.filename}: {e}") from e
            copied += 1
            logger.debug(f"Copied {entry.filename}")

        self.progress.complete(message=f"Copied {copied} files")
        return copied, missing

    def write_index(self, entries: list[DocEntry]) -> Path:
        """Render SKILL.md from the entries and write it to the skill folder."""
        index_path = self.config.index_path
        self.progress.update(f"Generating {index_path.name} from {self.config.manifest_name}...")
        try:
            index_path.write_text(render_skill_index(entries), encoding="utf-8")
        except OSError as e:
            raise SyncIOError(f"Error writing {index_path.name}: {e}") from e
        self.progress.update(f"Generated {index_path.name} with {len(entries)} entries")
        return index_path


def print_summary(summary: SyncSummary, console: Console | None = None) -> None:
    """Print the end-of-run summary table."""
    console = console or Console()

    table = Table(title="Summary", show_header=False)
    table.add_column("Item", style="cyan")
    table.add_column("Value")
    table.add_row("Location", str(summary.skill_dir))
    table.add_row("Files", f"{summary.copied} references")
    table.add_row("Components", str(summary.components))
    table.add_row("Guides", str(summary.guides))
    if summary.missing_files:
        table.add_row("Missing", str(len(summary.missing_files)), style="yellow")
    if summary.index_path:
        table.add_row("Index", str(summary.index_path))

    console.print(table)

    if summary.index_path:
        console.print("\nNext steps:")
        console.print(f"   1. Review: cat {summary.index_path}", highlight=False)
        console.print(f"   2. Check references: ls {summary.references_dir} | head -10", highlight=False)
        console.print("   3. Integrate: Copy the skill folder to your agent skills directory")


__all__ = ["SkillSyncDriver", "SyncSummary", "print_summary"]
