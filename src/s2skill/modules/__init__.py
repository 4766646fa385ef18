"""s2skill modules - Self-contained bricks following the brick philosophy

Each module is a self-contained component with clear contracts:
- Manifest Parser: Parse and filter llms.txt entries
- Index Renderer: Render SKILL.md from parsed entries
- Generator Runner: Run the upstream markdown generator
- Interaction Handler: Prompt the operator and show messages
- Progress Display: Show stage-based progress
"""

from . import (
    generator_runner,
    index_renderer,
    interaction_handler,
    manifest_parser,
    progress,
)

__all__ = [
    "generator_runner",
    "index_renderer",
    "interaction_handler",
    "manifest_parser",
    "progress",
]
