"""Error taxonomy for s2skill.

Every fatal condition of a sync run is a SkillSyncError subclass carrying
the process exit code the CLI should use.
"""


class SkillSyncError(Exception):
    """Base exception for s2skill errors."""

    exit_code = 1


class ConfigError(SkillSyncError):
    """Raised when configuration loading or resolution fails."""

    pass


class RepoPathRequiredError(ConfigError):
    """Raised when the index mode requires a repository path and none was given."""

    pass


class MissingDependencyError(SkillSyncError):
    """Raised when the upstream generator entry point is absent."""

    pass


class GeneratorFailedError(SkillSyncError):
    """Raised when the upstream generator exits non-zero or cannot start."""

    pass


class MissingOutputError(SkillSyncError):
    """Raised when the generator ran but its output directory is absent."""

    pass


class SyncIOError(SkillSyncError):
    """Raised when the manifest, a reference file or the index cannot be read or written."""

    pass


__all__ = [
    "ConfigError",
    "GeneratorFailedError",
    "MissingDependencyError",
    "MissingOutputError",
    "RepoPathRequiredError",
    "SkillSyncError",
    "SyncIOError",
]
