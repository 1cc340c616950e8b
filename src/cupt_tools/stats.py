from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from .annotations import decorate, is_chosen, retrieve_mwes
from .models import Document


@dataclass(slots=True)
class DocumentSummary:
    """Counts gathered over one parsed Cupt document."""

    doc_id: str
    num_paragraphs: int = 0
    num_sentences: int = 0
    num_tokens: int = 0
    num_chosen_tokens: int = 0
    mwe_types: Dict[str, int] = field(default_factory=dict)

    @property
    def num_mwes(self) -> int:
        return sum(self.mwe_types.values())


def summarize_document(doc_id: str, document: Document) -> DocumentSummary:
    """Count paragraphs, sentences, tokens and MWEs per type."""
    summary = DocumentSummary(doc_id=doc_id, num_paragraphs=len(document))
    type_counts: Counter[str] = Counter()
    for paragraph in document:
        summary.num_sentences += len(paragraph)
        for sentence in paragraph:
            summary.num_tokens += len(sentence)
            summary.num_chosen_tokens += sum(1 for t in sentence if is_chosen(t))
            for mwe in retrieve_mwes(decorate(sentence)).values():
                type_counts[mwe.type] += 1
    summary.mwe_types = dict(sorted(type_counts.items()))
    return summary
