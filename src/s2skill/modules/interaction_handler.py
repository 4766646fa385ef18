"""User interaction abstraction for CLI and testing.

This module provides a protocol-based approach to user interaction, allowing
different implementations for the CLI (using click) and for tests (mock
responses).

Example:
    >>> handler = CLIInteractionHandler()
    >>> if handler.confirm("Overwrite s2-skill folder?"):
    ...     handler.show_info("Removing existing folder...")

    Testing example:
    >>> test_handler = MockInteractionHandler(confirm_responses=[False])
    >>> test_handler.confirm("Overwrite?")
    False
"""

from typing import ClassVar, Protocol, runtime_checkable

import click


@runtime_checkable
class InteractionHandler(Protocol):
    """Protocol for user interaction.

    This protocol defines the interface the sync driver uses to talk to the
    operator, so the CLI and tests can supply different implementations.
    """

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question.

        Args:
            message: Confirmation question to display

        Returns:
            True only for an affirmative answer
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: Warning message to display
        """
        ...

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: Information message to display
        """
        ...


class CLIInteractionHandler:
    """Click-based CLI interaction handler.

    Confirmation reads one free-form answer from stdin. Only "yes" and "y"
    (any case) confirm; anything else, including an empty answer, declines.

    Example:
        >>> handler = CLIInteractionHandler()
        >>> handler.show_warning("File not found: Button.md")
    """

    AFFIRMATIVE_ANSWERS: ClassVar[frozenset[str]] = frozenset({"yes", "y"})

    @classmethod
    def is_affirmative(cls, answer: str) -> bool:
        """Check whether a raw answer confirms."""
        return answer.strip().lower() in cls.AFFIRMATIVE_ANSWERS

    def confirm(self, message: str) -> bool:
        """Prompt for a yes/no answer with colored output.

        Closed stdin counts as no answer and declines. Ctrl-C still aborts.

        Args:
            message: Confirmation question to display

        Returns:
            True if the operator answered yes/y, False otherwise

        Raises:
            click.Abort: If the prompt was interrupted
        """
        try:
            answer = click.prompt(
                click.style(f"{message} (yes/no)", fg="yellow"),
                default="",
                show_default=False,
                type=str,
            )
        except click.Abort as e:
            # click raises Abort for both EOF and Ctrl-C
            if isinstance(e.__context__, EOFError):
                click.echo()
                return False
            raise
        return self.is_affirmative(answer)

    def show_warning(self, message: str) -> None:
        """Display a warning message in yellow on stderr.

        Args:
            message: Warning message to display
        """
        click.secho(f"Warning: {message}", fg="yellow", err=True)

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: Information message to display
        """
        click.echo(message)


class MockInteractionHandler:
    """Mock interaction handler for testing with pre-programmed responses.

    Provides deterministic responses for testing without user interaction.
    Tracks all interactions for verification in tests.

    Example:
        >>> handler = MockInteractionHandler(confirm_responses=[True])
        >>> handler.confirm("Continue?")
        True
        >>> handler.show_warning("careful")
        >>> len(handler.interactions)
        2
    """

    def __init__(self, confirm_responses: list[bool] | None = None):
        """Initialize mock handler with pre-programmed responses.

        Args:
            confirm_responses: List of boolean responses for confirm()
        """
        self.confirm_responses = confirm_responses or []
        self._confirm_index = 0
        self.interactions: list[dict] = []

    def confirm(self, message: str) -> bool:
        """Return next pre-programmed confirmation response.

        Raises:
            IndexError: If no more confirm responses available
        """
        if self._confirm_index >= len(self.confirm_responses):
            raise IndexError(
                f"No more confirm responses available. "
                f"Provided {len(self.confirm_responses)}, "
                f"needed {self._confirm_index + 1}"
            )

        response = self.confirm_responses[self._confirm_index]
        self._confirm_index += 1

        self.interactions.append({"type": "confirm", "message": message, "response": response})
        return response

    def show_warning(self, message: str) -> None:
        """Record warning message without displaying."""
        self.interactions.append({"type": "warning", "message": message})

    def show_info(self, message: str) -> None:
        """Record info message without displaying."""
        self.interactions.append({"type": "info", "message": message})

    def get_interactions_by_type(self, interaction_type: str) -> list[dict]:
        """Get all interactions of a specific type ("confirm", "warning", "info")."""
        return [
            interaction
            for interaction in self.interactions
            if interaction["type"] == interaction_type
        ]

