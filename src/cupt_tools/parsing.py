"""
Parsing of the Cupt format: the PARSEME extension of CoNLL-U with an eleventh
column holding multiword-expression annotations.

Paragraphs are separated by blank lines and may hold several sentences, each
restarting its token IDs at 1. Comment lines (``#``) are discarded.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Tuple

from .errors import FormatError
from .models import (
    OUTSIDE_ID,
    ROOT_ID,
    Document,
    MweTag,
    Paragraph,
    RangeID,
    Sentence,
    SingleID,
    Token,
    TokenID,
)

LOGGER = logging.getLogger(__name__)

CUPT_FIELD_COUNT = 11

PARAGRAPH_SEPARATOR = "\n\n"
COMMENT_PREFIX = "#"
INTEGER_RE = re.compile(r"[0-9]+")


def read_cupt(path: str | Path, encoding: str = "utf-8") -> Document:
    """Read and parse an entire Cupt file."""
    LOGGER.debug("Reading Cupt file %s", path)
    return parse_cupt(Path(path).read_text(encoding=encoding))


def parse_cupt(text: str) -> Document:
    """Parse the textual contents of a Cupt file into paragraphs."""
    document: Document = []
    for index, chunk in enumerate(text.split(PARAGRAPH_SEPARATOR), start=1):
        if not chunk.strip("\r\n"):
            continue
        try:
            document.append(parse_paragraph(chunk))
        except FormatError as exc:
            raise FormatError(f"paragraph {index}: {exc}") from exc
    return document


def parse_paragraph(text: str) -> Paragraph:
    """Parse a blank-line free block of lines into one or more sentences.

    A new sentence starts whenever the first position of a token ID is lower
    than the one of the token right before it.
    """
    tokens: List[Token] = []
    for line_no, line in enumerate(text.split("\n"), start=1):
        if not line.rstrip("\r") or line.startswith(COMMENT_PREFIX):
            continue
        try:
            tokens.append(parse_token(line))
        except FormatError as exc:
            raise FormatError(f"line {line_no}: {exc}") from exc
    paragraph = group_sentences(tokens)
    LOGGER.debug(
        "Parsed paragraph with %d tokens in %d sentences", len(tokens), len(paragraph)
    )
    return paragraph


def group_sentences(tokens: List[Token]) -> Paragraph:
    """Split a token stream wherever a token ID steps back relative to its neighbour."""
    sentences: Paragraph = []
    current: Sentence = []
    for token in tokens:
        if current and token.id.first < current[-1].id.first:
            sentences.append(current)
            current = []
        current.append(token)
    if current:
        sentences.append(current)
    return sentences


def parse_token(line: str) -> Token:
    """Parse a single tab-separated Cupt line."""
    fields = line.rstrip("\r\n").split("\t")
    if len(fields) != CUPT_FIELD_COUNT:
        raise FormatError(
            f"wrong field count: expected {CUPT_FIELD_COUNT}, got {len(fields)}"
        )
    id_, form, lemma, upos, xpos, feats, head, deprel, deps, misc, mwe = fields
    return Token(
        id=parse_token_id(id_),
        form=form,
        lemma=lemma,
        upos=upos,
        xpos=xpos,
        feats=parse_feats(feats),
        head=parse_token_id(head),
        deprel=deprel,
        deps=deps,
        misc=misc,
        mwe=parse_mwe(mwe),
    )


def parse_token_id(text: str) -> TokenID:
    """Parse a token ID (``7``, ``3-4``) or one of the reserved ``_`` / ``-`` values.

    ``-`` is read as the root, so it cannot be told apart from ``0``.
    """
    if text == "_":
        return OUTSIDE_ID
    if text == "-":
        return ROOT_ID
    if "-" in text:
        parts = text.split("-")
        if len(parts) != 2:
            raise FormatError(f"invalid token ID range {text!r}")
        return RangeID(_parse_int(parts[0], text), _parse_int(parts[1], text))
    if "." in text:
        raise FormatError(f"invalid token ID {text!r}: empty nodes are not supported")
    return SingleID(_parse_int(text, text))


def parse_feats(text: str) -> Tuple[Tuple[str, str], ...]:
    """Parse the FEATS column into (name, value) pairs, keeping their order."""
    if text == "_":
        return ()
    pairs: List[Tuple[str, str]] = []
    for part in text.split("|"):
        items = part.split("=")
        if len(items) == 1:
            pairs.append((items[0], ""))
        elif len(items) == 2:
            pairs.append((items[0], items[1]))
        else:
            raise FormatError(f"invalid feature {part!r} in {text!r}")
    return tuple(pairs)


def parse_mwe(text: str) -> Tuple[MweTag, ...]:
    """Parse the MWE column; both ``*`` and ``_`` yield no annotation."""
    if text in ("*", "_"):
        return ()
    tags: List[MweTag] = []
    for part in text.split(";"):
        items = part.split(":")
        if len(items) == 1:
            tags.append((_parse_int(items[0], text), None))
        elif len(items) == 2:
            tags.append((_parse_int(items[0], text), items[1]))
        else:
            raise FormatError(f"invalid MWE annotation {part!r} in {text!r}")
    return tuple(tags)


def _parse_int(text: str, context: str) -> int:
    if not INTEGER_RE.fullmatch(text):
        raise FormatError(f"expected an integer, got {text!r} in {context!r}")
    return int(text)
