from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import total_ordering
from typing import Dict, List, Optional, Tuple

from .errors import ConsistencyError

# Sentence-local MWE identifier and MWE category (e.g. "LVC.full", "VID").
MweID = int
MweType = str
MweTag = Tuple[MweID, Optional[MweType]]


@total_ordering
class TokenID(ABC):
    """Position of a token within its sentence, either single or a range."""

    __slots__ = ()

    @property
    @abstractmethod
    def first(self) -> int:
        """First word position covered by the ID."""

    @abstractmethod
    def sort_key(self) -> tuple[int, int, int]:
        """Key ordering IDs by position, a range before the word it starts with."""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TokenID):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True, slots=True)
class SingleID(TokenID):
    """Ordinary 1-based word index; ``SingleID(0)`` stands for the root."""

    value: int

    @property
    def first(self) -> int:
        return self.value

    def sort_key(self) -> tuple[int, int, int]:
        return (self.value, 1, 0)


@dataclass(frozen=True, slots=True)
class RangeID(TokenID):
    """Inclusive span of a multiword token, e.g. ``3-4``."""

    start: int
    end: int

    @property
    def first(self) -> int:
        return self.start

    def sort_key(self) -> tuple[int, int, int]:
        # A range line precedes the first word it covers.
        return (self.start, 0, self.end)


ROOT_ID = SingleID(0)
# Tokens outside of the selected tokenization, written as "_".
OUTSIDE_ID = RangeID(0, 0)


@total_ordering
@dataclass(frozen=True, slots=True)
class Token:
    """One line of a Cupt file.

    ``feats`` keeps the (name, value) pairs in file order and ``mwe`` holds
    the (mwe_id, mwe_type) tags of the last column. In the compact form only
    the first token of an expression carries its type.
    """

    id: TokenID
    form: str
    lemma: str
    upos: str
    xpos: str
    feats: Tuple[Tuple[str, str], ...]
    head: TokenID
    deprel: str
    deps: str
    misc: str
    mwe: Tuple[MweTag, ...] = ()

    @property
    def feature_map(self) -> Dict[str, str]:
        """Return the morphological features as a dictionary."""
        return dict(self.feats)

    def sort_key(self) -> tuple:
        """Structural key over all fields; untyped MWE tags sort first."""
        return (
            self.id.sort_key(),
            self.form,
            self.lemma,
            self.upos,
            self.xpos,
            self.feats,
            self.head.sort_key(),
            self.deprel,
            self.deps,
            self.misc,
            tuple(
                (mwe_id, mwe_type is not None, mwe_type or "")
                for mwe_id, mwe_type in self.mwe
            ),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True, slots=True)
class Mwe:
    """A multiword expression: its type and the tokens it spans."""

    type: MweType
    tokens: frozenset[Token]

    def merge(self, other: Mwe) -> Mwe:
        if self.type != other.type:
            raise ConsistencyError(
                f"Multiword expression annotated with conflicting types "
                f"{self.type!r} and {other.type!r}"
            )
        return Mwe(type=self.type, tokens=self.tokens | other.tokens)

    def sorted_tokens(self) -> List[Token]:
        """Return the tokens of the expression in sentence order."""
        return sorted(self.tokens)


Sentence = List[Token]
Paragraph = List[Sentence]
Document = List[Paragraph]
