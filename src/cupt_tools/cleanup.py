from __future__ import annotations

from dataclasses import replace
from typing import AbstractSet

from .annotations import abstract, decorate
from .models import MweType, Sentence


def remove_annotations(
    keep_types: AbstractSet[MweType], sentence: Sentence
) -> Sentence:
    """
    Remove every MWE whose type is not in ``keep_types``.

    An empty ``keep_types`` removes all annotations. The result is returned
    in compact form.
    """
    cleared = [
        replace(
            token,
            mwe=tuple(tag for tag in token.mwe if keep_types and tag[1] in keep_types),
        )
        for token in decorate(sentence)
    ]
    return abstract(cleared)
