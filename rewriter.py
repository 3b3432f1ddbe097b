"""Weak-phrase rewriter: swaps hedging filler for stronger action words."""

from __future__ import annotations

import re

from lexicon import WEAK_TO_STRONG


def phrase_regex(phrase: str) -> str:
    """Build a boundary-anchored regex source for a word or multi-word phrase.

    Words inside the phrase may be separated by any run of whitespace. The
    anchors are lookarounds rather than ``\\b`` so that phrases which begin or
    end with punctuation (``C#``, ``Node.js``) are still matched as a whole.
    """
    body = r"\s+".join(re.escape(word) for word in phrase.split())
    return rf"(?<!\w){body}(?!\w)"


# Longest phrases first so "worked on" is never shadowed by a shorter entry.
_WEAK_PATTERN = re.compile(
    "|".join(
        phrase_regex(p) for p in sorted(WEAK_TO_STRONG, key=len, reverse=True)
    ),
    re.IGNORECASE,
)


def _replacement(match: re.Match) -> str:
    key = " ".join(match.group(0).split()).lower()
    return WEAK_TO_STRONG.get(key, match.group(0))


def rewrite(text: str) -> str:
    """Replace every weak phrase in *text* with its strong counterpart.

    Matching is case-insensitive and whole-word only; the replacement is
    always the canonical (lowercase) form. Text without weak phrases is
    returned unchanged.
    """
    if not text:
        return ""
    return _WEAK_PATTERN.sub(_replacement, text)
