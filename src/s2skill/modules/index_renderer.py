"""SKILL.md rendering.

Builds the token-efficient skill index from parsed manifest entries: each
entry is listed as its bare filename followed by a one-line description,
grouped into components and guides.
"""

from s2skill.modules.manifest_parser import DocEntry, partition_entries

SKILL_HEADER = """# React Spectrum S2 Agent Skill

This skill provides comprehensive documentation for React Spectrum S2 components. It includes complete API references, usage examples, prop documentation, and styling guides.

## How to Use

All component and guide documentation is included in the `references/` folder. Each file contains:
- Complete component description
- API/props reference
- Code examples
- Type signatures
- Styling information

Generated from the React Spectrum S2 source documentation.

---

"""


def _render_section(entries: list[DocEntry]) -> str:
    return "".join(f"{entry.filename}\n{entry.description}\n\n" for entry in entries)


def render_skill_index(entries: list[DocEntry]) -> str:
    """Render SKILL.md content for the given entries.

    Args:
        entries: Filtered manifest entries in display order

    Returns:
        Markdown text; the guides section is omitted when there are no guides
    """
    components, guides = partition_entries(entries)

    md = SKILL_HEADER
    md += f"## Components ({len(components)})\n\n"
    md += _render_section(components)

    if guides:
        md += f"---\n\n## Guides & References ({len(guides)})\n\n"
        md += _render_section(guides)

    return md


__all__ = ["SKILL_HEADER", "render_skill_index"]
