"""
Placeholder substitution for translated text.

Placeholders are literal tokens chosen by the caller, usually braced names:

    P({"{player}": "Steve", "{world}": "overworld"})

All tokens are replaced in a single left-to-right pass over the text, so a
replacement value is never scanned again for other tokens.
"""

import re
from collections.abc import Mapping

# Placeholder set passed to Manager.translate()
P = dict[str, str]


def _build_pattern(tokens: list[str]) -> re.Pattern[str]:
    # Longest first so that "{player_name}" wins over "{player" at the same position
    ordered = sorted(tokens, key=len, reverse=True)
    return re.compile("|".join(re.escape(token) for token in ordered))


def substitute(text: str, placeholders: Mapping[str, object] | None) -> str:
    """Replace every occurrence of every placeholder token in text.

    Args:
        text: Translated text containing placeholder tokens
        placeholders: Mapping token → replacement (values converted with str())

    Returns:
        Text with all known tokens replaced. Unknown tokens are left verbatim.

    Example:
        >>> substitute("Hello {a}, you are in {b}", {"{a}": "Steve", "{b}": "{a}"})
        'Hello Steve, you are in {a}'
    """
    if not placeholders:
        return text

    replacements = {str(token): str(value) for token, value in placeholders.items() if token}
    if not replacements:
        return text

    pattern = _build_pattern(list(replacements))
    return pattern.sub(lambda match: replacements[match.group(0)], text)
