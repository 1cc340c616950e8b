from __future__ import annotations

from .errors import ConsistencyError
from .models import Document, Paragraph, Sentence


def merge_document(primary: Document, secondary: Document) -> Document:
    """Merge two parses of the same document paragraph by paragraph."""
    _check_lengths("paragraph", len(primary), len(secondary))
    return [merge_paragraph(x, y) for x, y in zip(primary, secondary)]


def merge_paragraph(primary: Paragraph, secondary: Paragraph) -> Paragraph:
    _check_lengths("sentence", len(primary), len(secondary))
    return [merge_sentence(x, y) for x, y in zip(primary, secondary)]


def merge_sentence(primary: Sentence, secondary: Sentence) -> Sentence:
    """
    Copy the tokens of ``primary`` missing from ``secondary`` into it.

    Both sentences are sorted by token ID; on shared IDs the token of
    ``secondary`` is kept.
    """
    merged: Sentence = []
    i = j = 0
    while i < len(primary) and j < len(secondary):
        x, y = primary[i], secondary[j]
        if x.id < y.id:
            merged.append(x)
            i += 1
        elif x.id == y.id:
            merged.append(y)
            i += 1
            j += 1
        else:
            raise ConsistencyError(
                f"Token {y.id} of the secondary sentence has no counterpart "
                f"in the primary sentence (next primary token is {x.id})"
            )
    if j < len(secondary):
        raise ConsistencyError(
            f"Primary sentence exhausted with {len(secondary) - j} secondary "
            "token(s) left"
        )
    merged.extend(primary[i:])
    return merged


def _check_lengths(kind: str, primary: int, secondary: int) -> None:
    if primary != secondary:
        raise ConsistencyError(
            f"Cannot merge: {primary} {kind}(s) in primary, {secondary} in secondary"
        )
