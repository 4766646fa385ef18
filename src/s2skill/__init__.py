"""s2skill - React Spectrum S2 agent skill synchronization

Philosophy:
- Ruthless simplicity
- Brick architecture (self-contained modules)
- Fail fast with helpful guidance

The s2skill-sync CLI regenerates the React Spectrum S2 reference markdown
from an upstream checkout, filters it down to the files the skill needs,
and optionally renders the SKILL.md index.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
