"""
Pattern Matching Module.

Compiles configured patterns and applies them to branch names and titles.
Patterns are compiled at the point of use so that a malformed pattern is
reported where it is first applied.
"""

import re
from typing import Optional

from linkers.errors import MalformedPatternError
from linkers.models import PatternSpec


# "g" and "u" are accepted for compatibility, matching is first-match and
# unicode-aware already.
FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": 0,
    "g": 0,
}


def compile_pattern(spec: PatternSpec) -> re.Pattern:
    """
    Compile a pattern with its one-letter flags.

    Args:
        spec (PatternSpec): Pattern text and flags

    Returns:
        re.Pattern: Compiled pattern

    Raises:
        MalformedPatternError: If the text or a flag is invalid
    """
    flags = 0
    for flag in spec.flags:
        if flag not in FLAG_MAP:
            raise MalformedPatternError(f"Invalid flag '{flag}' in pattern {spec}")
        flags |= FLAG_MAP[flag]

    try:
        return re.compile(spec.pattern, flags)
    except re.error as e:
        raise MalformedPatternError(f"Invalid pattern {spec}: {e}") from e


def match_first(source: str, spec: PatternSpec) -> Optional[str]:
    """Return the first substring of ``source`` matching ``spec``, if any."""
    match = compile_pattern(spec).search(source)
    return match.group(0) if match else None


def clean_title(title: str, spec: Optional[PatternSpec] = None) -> str:
    """
    Remove every substring matching the clean-title pattern.

    Args:
        title (str): Raw pull request title
        spec (Optional[PatternSpec]): Noise pattern, title is kept as is when None

    Returns:
        str: Cleaned title
    """
    if spec is None:
        return title
    return compile_pattern(spec).sub("", title)
