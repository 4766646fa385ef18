"""
Shared test fixtures and configuration for s2skill tests.

This module provides common fixtures used across all test types:
- A fake React Spectrum checkout with generated docs
- Sync configurations pointing at temporary directories
- A patched generator subprocess
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from s2skill.config_manager import (
    DEFAULT_GENERATED_DIR,
    DEFAULT_GENERATOR_SCRIPT,
    IndexMode,
    SyncConfig,
)

# ============================================================================
# MANIFEST FIXTURES
# ============================================================================

SAMPLE_MANIFEST = """# React Spectrum S2

> Documentation for React Spectrum S2 components.

## Components

- [Button](Button.md): Buttons allow users to perform an action.
- [Menu](Menu.md): Menus display a list of actions or options.
- [Testing Menu](Menu/testing.md): Testing Menu with test utilities.
- [Picker](Picker.md): Pickers allow users to choose a single option.

## Guides

- [Getting Started](getting-started.md): Install it.
- [Styling](styling.md): Style macro reference.
- [Release v0.1](releases/v0-1.md): Release notes.
- [v1.0.0](v1-0-0.md): Release notes.
- [Testing](testing.md): Old testing description.
"""

SAMPLE_FILES = [
    "Button.md",
    "Menu.md",
    "Picker.md",
    "getting-started.md",
    "styling.md",
    "testing.md",
]


@pytest.fixture
def sample_manifest() -> str:
    """Manifest text exercising every filtering rule."""
    return SAMPLE_MANIFEST


# ============================================================================
# DIRECTORY FIXTURES
# ============================================================================


def make_upstream_repo(root: Path, manifest: str, files: list[str]) -> Path:
    """Create a fake React Spectrum checkout with already generated docs."""
    repo = root / "react-spectrum"
    script = repo / DEFAULT_GENERATOR_SCRIPT
    script.parent.mkdir(parents=True)
    script.write_text("// generator\n")

    generated = repo / DEFAULT_GENERATED_DIR
    generated.mkdir(parents=True)
    (generated / "llms.txt").write_text(manifest)
    for filename in files:
        (generated / filename).write_text(f"# {filename}\n")

    return repo


@pytest.fixture
def upstream_repo(tmp_path) -> Path:
    """Fake upstream checkout holding SAMPLE_MANIFEST and SAMPLE_FILES."""
    return make_upstream_repo(tmp_path, SAMPLE_MANIFEST, SAMPLE_FILES)


@pytest.fixture
def make_repo(tmp_path):
    """Factory for upstream checkouts with a custom manifest and file set."""

    def _make(manifest: str, files: list[str]) -> Path:
        root = tmp_path / "custom"
        root.mkdir(exist_ok=True)
        return make_upstream_repo(root, manifest, files)

    return _make


@pytest.fixture
def output_dir(tmp_path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def generate_config(upstream_repo, output_dir) -> SyncConfig:
    """Generate-mode config writing to output_dir/s2-skill."""
    return SyncConfig(repo_path=upstream_repo, output_path=output_dir)


@pytest.fixture
def preserve_config(upstream_repo, output_dir) -> SyncConfig:
    """Preserve-mode config writing straight into output_dir."""
    return SyncConfig(
        repo_path=upstream_repo,
        output_path=output_dir,
        index_mode=IndexMode.PRESERVE,
        skill_dir_name="",
    )


# ============================================================================
# SUBPROCESS FIXTURES
# ============================================================================


@pytest.fixture
def mock_generator():
    """Patch the generator subprocess so no real yarn command runs."""
    with patch("s2skill.modules.generator_runner.subprocess.run") as mock_run:
        yield mock_run
