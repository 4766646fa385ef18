"""
Upstream Generator Runner Module

Runs the React Spectrum markdown generator inside an upstream checkout and
locates its output.

Security Requirements:
- Command passed as an argument list
- No shell=True in subprocess calls
"""

import logging
import subprocess
from pathlib import Path

from s2skill.exceptions import GeneratorFailedError, MissingDependencyError, MissingOutputError

logger = logging.getLogger(__name__)


class GeneratorRunner:
    """
    Validate an upstream checkout and run its markdown generator.

    The generator's stdout/stderr are inherited so the operator sees its
    output live. The call blocks until the generator exits.
    """

    @classmethod
    def check_source(cls, script_path: Path) -> Path:
        """
        Verify the generator entry point exists.

        Args:
            script_path: Expected path of the generator script

        Returns:
            Path: The verified script path

        Raises:
            MissingDependencyError: If the script is absent
        """
        if not script_path.is_file():
            raise MissingDependencyError(
                f"Cannot find {script_path.name} at:\n"
                f"   {script_path}\n"
                "   Make sure repoPath points to React Spectrum root directory."
            )
        logger.debug(f"Found generator script at {script_path}")
        return script_path

    @classmethod
    def run(cls, command: list[str], repo_path: Path) -> None:
        """
        Run the generator command from the repository root.

        Args:
            command: Generator command as list of strings
            repo_path: Working directory for the command

        Raises:
            GeneratorFailedError: If the command exits non-zero or cannot start
        """
        logger.debug(f"Running generator: {' '.join(command)} (cwd={repo_path})")
        try:
            subprocess.run(command, cwd=repo_path, check=True)
        except subprocess.CalledProcessError as e:
            raise GeneratorFailedError(
                f"Generator command failed with exit code {e.returncode}: {' '.join(command)}"
            ) from e
        except OSError as e:
            raise GeneratorFailedError(f"Could not start generator command: {e}") from e

    @classmethod
    def check_output(cls, source_dir: Path) -> Path:
        """
        Verify the generator produced its output directory.

        Args:
            source_dir: Expected output directory

        Returns:
            Path: The verified directory

        Raises:
            MissingOutputError: If the directory is absent
        """
        if not source_dir.is_dir():
            raise MissingOutputError(f"Could not find generated files at:\n   {source_dir}")
        logger.debug(f"Found generated files at {source_dir}")
        return source_dir


__all__ = ["GeneratorRunner"]
