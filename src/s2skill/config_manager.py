"""Configuration management module.

This module resolves the settings of a sync run from CLI arguments, an
optional TOML config file and the defaults of the selected index mode.

Precedence: CLI > config file > mode defaults.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

from s2skill.exceptions import ConfigError, RepoPathRequiredError

try:
    import tomli  # type: ignore[import]
except ImportError:
    # Fallback for older Python versions
    try:
        import tomllib as tomli  # type: ignore[import]
    except ImportError as e:
        raise ImportError("toml library not available. Install with: pip install tomli") from e

logger = logging.getLogger(__name__)

# Installed location of this package; the project root is searched for from here
PACKAGE_DIR = Path(__file__).resolve().parent

# Files that mark the s2skill project root
SKILL_INDEX_MARKER = "SKILL.md"
PROJECT_ROOT_MARKERS = (SKILL_INDEX_MARKER, "pyproject.toml")

DEFAULT_GENERATOR_COMMAND = ["yarn", "workspace", "@react-spectrum/s2-docs", "generate:md"]
DEFAULT_GENERATOR_SCRIPT = "packages/dev/s2-docs/scripts/generateMarkdownDocs.mjs"
DEFAULT_GENERATED_DIR = "packages/dev/s2-docs/dist/s2"
DEFAULT_SKILL_DIR_NAME = "s2-skill"


class IndexMode(Enum):
    """How the SKILL.md index is handled by a sync run."""

    GENERATE = "generate"  # Render SKILL.md from the filtered entries
    PRESERVE = "preserve"  # Leave the hand-maintained SKILL.md alone


@dataclass
class SyncConfig:
    """Resolved settings for one sync run."""

    repo_path: Path
    output_path: Path
    index_mode: IndexMode = IndexMode.GENERATE
    skill_dir_name: str = DEFAULT_SKILL_DIR_NAME
    generator_command: list[str] = field(default_factory=lambda: list(DEFAULT_GENERATOR_COMMAND))
    generator_script: str = DEFAULT_GENERATOR_SCRIPT
    generated_dir: str = DEFAULT_GENERATED_DIR
    manifest_name: str = "llms.txt"
    references_dir_name: str = "references"
    index_filename: str = "SKILL.md"

    @property
    def generator_script_path(self) -> Path:
        """Upstream generator entry point that must exist in the checkout."""
        return self.repo_path / self.generator_script

    @property
    def source_dir(self) -> Path:
        """Directory the generator writes its markdown and manifest to."""
        return self.repo_path / self.generated_dir

    @property
    def manifest_path(self) -> Path:
        return self.source_dir / self.manifest_name

    @property
    def skill_dir(self) -> Path:
        """Destination directory; the output path itself when no name is set."""
        if self.skill_dir_name:
            return self.output_path / self.skill_dir_name
        return self.output_path

    @property
    def references_dir(self) -> Path:
        return self.skill_dir / self.references_dir_name

    @property
    def index_path(self) -> Path:
        return self.skill_dir / self.index_filename

    @property
    def generates_index(self) -> bool:
        return self.index_mode is IndexMode.GENERATE


def _find_upwards(origin: Path, markers: tuple[str, ...]) -> Path | None:
    for directory in (origin, *origin.parents):
        if any((directory / marker).is_file() for marker in markers):
            return directory
    return None


def find_project_root() -> Path:
    """Locate the s2skill project root that holds the hand-maintained SKILL.md.

    A source or editable checkout is found by walking up from the package
    for SKILL.md or pyproject.toml. A regular install lives in site-packages,
    so the search then walks up from the current directory for SKILL.md.

    Raises:
        ConfigError: If neither search finds the project root
    """
    root = _find_upwards(PACKAGE_DIR, PROJECT_ROOT_MARKERS)
    if root is None:
        root = _find_upwards(Path.cwd(), (SKILL_INDEX_MARKER,))
    if root is None:
        raise ConfigError(
            f"Could not find the s2skill project root: no {SKILL_INDEX_MARKER} in "
            f"{Path.cwd()} or its parents. Pass OUTPUT_PATH explicitly."
        )
    return root


# Defaults that differ per index mode. None means "must be supplied".
MODE_DEFAULTS: dict[IndexMode, dict[str, Any]] = {
    IndexMode.GENERATE: {
        "repo_path": Path.cwd,
        "output_path": Path.cwd,
        "skill_dir_name": DEFAULT_SKILL_DIR_NAME,
    },
    IndexMode.PRESERVE: {
        "repo_path": None,
        "output_path": find_project_root,
        "skill_dir_name": "",
    },
}

# Keys accepted from the TOML config file
CONFIG_KEYS = {
    "repo_path",
    "output_path",
    "index_mode",
    "skill_dir_name",
    "generator_command",
    "generator_script",
    "generated_dir",
    "manifest_name",
    "references_dir_name",
    "index_filename",
}

# Every key except generator_command must hold a string
STRING_KEYS = CONFIG_KEYS - {"generator_command"}


class ConfigManager:
    """Load the optional s2skill config file and resolve run settings.

    The config file lives at ~/.s2skill/config.toml unless a custom path is
    given. A missing default file is not an error.
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".s2skill"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

    @classmethod
    def get_config_path(cls, custom_path: str | None = None) -> Path:
        """Get configuration file path.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Path to config file

        Raises:
            ConfigError: If a custom path was given and does not exist
        """
        if custom_path:
            path = Path(custom_path).expanduser().resolve()
            if not path.exists():
                raise ConfigError(f"Config file not found: {path}")
            return path

        return cls.DEFAULT_CONFIG_FILE

    @classmethod
    def load_config(cls, custom_path: str | None = None) -> dict[str, Any]:
        """Load known settings from the config file.

        Args:
            custom_path: Custom config file path (optional)

        Returns:
            Dict of recognised keys (empty when no config file exists)

        Raises:
            ConfigError: If the file cannot be parsed or a value has the wrong type
        """
        config_path = cls.get_config_path(custom_path)

        if not config_path.exists():
            logger.debug("Config file not found, using defaults")
            return {}

        try:
            with open(config_path, "rb") as f:
                data = tomli.load(f)  # type: ignore[attr-defined]
        except Exception as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        logger.debug(f"Loaded config from: {config_path}")

        settings = {}
        for key, value in data.items():
            if key not in CONFIG_KEYS:
                logger.debug(f"Ignoring unknown config key: {key}")
                continue
            if key in STRING_KEYS and not isinstance(value, str):
                raise ConfigError(
                    f"{key} in {config_path} must be a string, got {type(value).__name__}"
                )
            settings[key] = value
        return settings

    @classmethod
    def parse_index_mode(cls, value: str | IndexMode) -> IndexMode:
        """Convert a string into an IndexMode.

        Raises:
            ConfigError: If the value is not a known mode
        """
        if isinstance(value, IndexMode):
            return value
        try:
            return IndexMode(str(value).strip().lower())
        except ValueError as e:
            valid = ", ".join(m.value for m in IndexMode)
            raise ConfigError(f"Invalid index mode '{value}' (expected one of: {valid})") from e

    @classmethod
    def resolve(
        cls,
        repo_path: str | None = None,
        output_path: str | None = None,
        index_mode: str | IndexMode | None = None,
        custom_path: str | None = None,
    ) -> SyncConfig:
        """Resolve run settings with precedence: CLI > config > mode defaults.

        Args:
            repo_path: Upstream repository root from the CLI (optional)
            output_path: Destination root from the CLI (optional)
            index_mode: Index mode from the CLI (optional)
            custom_path: Custom config file path (optional)

        Returns:
            SyncConfig ready for the sync driver

        Raises:
            ConfigError: If the config file is invalid, or the repository
                path is required by the mode but was not supplied
        """
        file_settings = cls.load_config(custom_path)

        mode = cls.parse_index_mode(index_mode or file_settings.get("index_mode", "generate"))
        defaults = MODE_DEFAULTS[mode]

        repo = repo_path or file_settings.get("repo_path")
        if repo is None:
            if defaults["repo_path"] is None:
                raise RepoPathRequiredError(f"A repository path is required in {mode.value} mode")
            repo = defaults["repo_path"]()

        output = output_path or file_settings.get("output_path") or defaults["output_path"]()

        config = SyncConfig(
            repo_path=Path(repo).expanduser().resolve(),
            output_path=Path(output).expanduser().resolve(),
            index_mode=mode,
            skill_dir_name=file_settings.get("skill_dir_name", defaults["skill_dir_name"]),
        )

        overrides = {
            key: file_settings[key]
            for key in (
                "generator_script",
                "generated_dir",
                "manifest_name",
                "references_dir_name",
                "index_filename",
            )
            if key in file_settings
        }
        command = file_settings.get("generator_command")
        if command is not None:
            if isinstance(command, str):
                command = command.split()
            if not command or not all(isinstance(part, str) for part in command):
                raise ConfigError("generator_command must be a non-empty list of strings")
            overrides["generator_command"] = list(command)

        config = replace(config, **overrides)
        logger.debug(
            f"Resolved config: mode={config.index_mode.value} repo={config.repo_path} "
            f"skill_dir={config.skill_dir}"
        )
        return config


__all__ = [
    "ConfigManager",
    "IndexMode",
    "MODE_DEFAULTS",
    "find_project_root",
    "SyncConfig",
]
