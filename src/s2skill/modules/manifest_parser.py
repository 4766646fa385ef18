"""Manifest parsing for the upstream llms.txt listing.

The generator writes a markdown list where each entry line looks like:

    - [Button](Button.md): Buttons allow users to perform an action.

parse_manifest() turns that text into the ordered list of DocEntry records
that should be copied into the skill. Release notes and per-component
testing pages are dropped, duplicate filenames keep their first
occurrence, and exactly one top-level testing.md is always present.

Public API:
    DocEntry: One documentation file to materialize
    parse_manifest: Parse and filter manifest text
    iter_manifest_lines: Raw (display name, path, description) triples
    is_component: Component vs guide classification
    partition_entries: Split entries into components and guides
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

logger = logging.getLogger(__name__)

ENTRY_PATTERN = re.compile(r"^\s*-\s*\[([^\]]+)\]\(([^)]+)\):\s*(.*)")

TESTING_FILENAME = "testing.md"
GETTING_STARTED_FILENAME = "getting-started.md"


@dataclass(frozen=True)
class DocEntry:
    """A documentation file selected from the manifest."""

    name: str
    filename: str
    display_name: str
    description: str


class ManifestFilter:
    """Filtering rules applied to manifest entries.

    Example:
        >>> entries = ManifestFilter.parse("- [Button](Button.md): Buttons")
        >>> [e.filename for e in entries]
        ['Button.md', 'testing.md']
    """

    RELEASE_PREFIXES: ClassVar[tuple[str, ...]] = ("v0-", "v1-")
    RELEASE_SEGMENT: ClassVar[str] = "releases/"

    # filename -> (display name, description)
    CANONICAL_ENTRIES: ClassVar[dict[str, tuple[str, str]]] = {
        TESTING_FILENAME: (
            "Testing",
            "How to test an application built with React Spectrum using test "
            "utilities to simulate common user interactions",
        ),
        GETTING_STARTED_FILENAME: (
            "Getting started",
            "Learn how to install and set up React Spectrum S2 in your project "
            "with your preferred package manager and framework",
        ),
    }

    @classmethod
    def is_release_notes(cls, path: str, filename: str) -> bool:
        """Check if the entry points at versioned release notes."""
        return filename.startswith(cls.RELEASE_PREFIXES) or cls.RELEASE_SEGMENT in path

    @classmethod
    def is_nested_testing_page(cls, path: str, filename: str) -> bool:
        """Check if the entry is a per-component testing page (e.g. Menu/testing.md)."""
        return "/" in path and filename == TESTING_FILENAME

    @classmethod
    def make_entry(cls, filename: str, display_name: str, description: str) -> DocEntry:
        """Build a DocEntry, applying canonical titles where they exist."""
        canonical = cls.CANONICAL_ENTRIES.get(filename)
        if canonical:
            display_name, description = canonical

        return DocEntry(
            name=filename.removesuffix(".md"),
            filename=filename,
            display_name=display_name,
            description=description.strip(),
        )

    @classmethod
    def parse(cls, text: str) -> list[DocEntry]:
        """Parse manifest text into filtered, deduplicated entries.

        Args:
            text: Full contents of llms.txt

        Returns:
            Entries in manifest order, with a canonical testing.md appended
            last if the manifest did not provide a top-level one
        """
        entries: list[DocEntry] = []
        seen_filenames: set[str] = set()

        for display_name, path, description in iter_manifest_lines(text):
            filename = path.rsplit("/", 1)[-1]

            if cls.is_release_notes(path, filename):
                logger.debug(f"Skipping release notes: {path}")
                continue

            if cls.is_nested_testing_page(path, filename):
                logger.debug(f"Skipping component testing page: {path}")
                continue

            if filename in seen_filenames:
                logger.debug(f"Skipping duplicate filename: {path}")
                continue
            seen_filenames.add(filename)

            entries.append(cls.make_entry(filename, display_name, description))

        if TESTING_FILENAME not in seen_filenames:
            logger.debug(f"No top-level {TESTING_FILENAME} in manifest, adding canonical entry")
            entries.append(cls.make_entry(TESTING_FILENAME, "", ""))

        return entries


def iter_manifest_lines(text: str) -> Iterator[tuple[str, str, str]]:
    """Yield (display name, path, description) for every entry line.

    Headings, prose and blank lines are skipped.
    """
    for line in text.split("\n"):
        match = ENTRY_PATTERN.match(line)
        if match:
            display_name, path, description = match.groups()
            yield display_name, path, description


def parse_manifest(text: str) -> list[DocEntry]:
    """Parse llms.txt text into the entries to copy. See ManifestFilter.parse."""
    return ManifestFilter.parse(text)


def is_component(entry: DocEntry) -> bool:
    """Components are named in PascalCase; everything else is a guide."""
    return entry.name[:1].isascii() and entry.name[:1].isupper()


def partition_entries(entries: list[DocEntry]) -> tuple[list[DocEntry], list[DocEntry]]:
    """Split entries into (components, guides), preserving order."""
    components = [e for e in entries if is_component(e)]
    guides = [e for e in entries if not is_component(e)]
    return components, guides


__all__ = [
    "DocEntry",
    "GETTING_STARTED_FILENAME",
    "ManifestFilter",
    "TESTING_FILENAME",
    "is_component",
    "iter_manifest_lines",
    "parse_manifest",
    "partition_entries",
]
