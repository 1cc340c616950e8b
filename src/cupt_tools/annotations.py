"""
Conversions between the two encodings of MWE annotations.

On disk only the first token of an expression carries its type (compact form);
``decorate`` copies the type onto every tag of the expression and ``abstract``
restores the compact form.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Set

from .errors import ConsistencyError
from .models import Mwe, MweID, MweTag, MweType, Sentence, Token


def decorate(sentence: Sentence) -> Sentence:
    """Return a copy of the sentence where every MWE tag carries its type."""
    known_types: Dict[MweID, MweType] = {}
    decorated: Sentence = []
    for token in sentence:
        tags: List[MweTag] = []
        for mwe_id, mwe_type in token.mwe:
            if mwe_type is None:
                if mwe_id not in known_types:
                    raise ConsistencyError(
                        f"MWE {mwe_id} continues at token {token.id} "
                        "before any typed occurrence"
                    )
                mwe_type = known_types[mwe_id]
            else:
                known_types[mwe_id] = mwe_type
            tags.append((mwe_id, mwe_type))
        decorated.append(replace(token, mwe=tuple(tags)))
    return decorated


def abstract(sentence: Sentence) -> Sentence:
    """Inverse of :func:`decorate`: keep the type on first occurrences only."""
    seen: Set[MweID] = set()
    compact: Sentence = []
    for token in sentence:
        tags: List[MweTag] = []
        for mwe_id, mwe_type in token.mwe:
            if mwe_id in seen:
                tags.append((mwe_id, None))
            else:
                seen.add(mwe_id)
                tags.append((mwe_id, mwe_type))
        compact.append(replace(token, mwe=tuple(tags)))
    return compact


def preserve_only(mwe_type: MweType, sentence: Sentence) -> Sentence:
    """Drop the tags of a decorated sentence whose type differs from ``mwe_type``."""
    return [
        replace(token, mwe=tuple(tag for tag in token.mwe if tag[1] == mwe_type))
        for token in sentence
    ]


def retrieve_mwes(sentence: Sentence) -> Dict[MweID, Mwe]:
    """Collect the multiword expressions of a decorated sentence by ID."""
    expressions: Dict[MweID, Mwe] = {}
    for token in sentence:
        for mwe_id, mwe_type in token.mwe:
            if mwe_type is None:
                raise ConsistencyError(
                    f"MWE {mwe_id} at token {token.id} has no type; "
                    "decorate the sentence first"
                )
            found = Mwe(type=mwe_type, tokens=frozenset([token]))
            if mwe_id in expressions:
                found = expressions[mwe_id].merge(found)
            expressions[mwe_id] = found
    return expressions


def is_chosen(token: Token) -> bool:
    """Return True when the token belongs to the selected segmentation."""
    return token.upos != "_"
