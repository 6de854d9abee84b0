"""
Tokenizer for free-text profiles.

Splits on space, period and comma only. No lowercasing, no stripping of other
punctuation: "Entry-level" and "entry-level" are different tokens.
"""
from typing import List

SEPARATORS = frozenset(" .,")


def tokenize(text: str) -> List[str]:
    """
    Split text into tokens in order of appearance.
    Runs of separators never produce empty tokens.
    """
    tokens = []
    current = []
    for ch in text:
        if ch in SEPARATORS:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens
