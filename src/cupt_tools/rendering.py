from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Tuple

from .models import (
    OUTSIDE_ID,
    Document,
    MweTag,
    Paragraph,
    RangeID,
    SingleID,
    Token,
    TokenID,
)

LOGGER = logging.getLogger(__name__)


def write_cupt(document: Document, path: str | Path, encoding: str = "utf-8") -> None:
    """Render the document and write it to ``path``."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_cupt(document), encoding=encoding)
    LOGGER.debug("Wrote %d paragraphs to %s", len(document), target)


def render_cupt(document: Document) -> str:
    """Render paragraphs separated by a single blank line."""
    return "\n".join(render_paragraph(paragraph) for paragraph in document)


def render_paragraph(paragraph: Paragraph) -> str:
    """Render every token of every sentence on its own newline-terminated line."""
    return "".join(
        render_token(token) + "\n" for sentence in paragraph for token in sentence
    )


def render_token(token: Token) -> str:
    return "\t".join(
        [
            render_token_id(token.id),
            token.form,
            token.lemma,
            token.upos,
            token.xpos,
            render_feats(token.feats),
            render_token_id(token.head),
            token.deprel,
            token.deps,
            token.misc,
            render_mwe(token.mwe),
        ]
    )


def render_token_id(token_id: TokenID) -> str:
    if token_id == OUTSIDE_ID:
        return "_"
    if isinstance(token_id, RangeID):
        return f"{token_id.start}-{token_id.end}"
    if isinstance(token_id, SingleID):
        return str(token_id.value)
    raise TypeError(f"Unsupported token ID {token_id!r}")


def render_feats(feats: Iterable[Tuple[str, str]]) -> str:
    rendered = [f"{name}={value}" for name, value in feats]
    if not rendered:
        return "_"
    return "|".join(rendered)


def render_mwe(tags: Iterable[MweTag]) -> str:
    rendered = [
        str(mwe_id) if mwe_type is None else f"{mwe_id}:{mwe_type}"
        for mwe_id, mwe_type in tags
    ]
    if not rendered:
        return "*"
    return ";".join(rendered)
