from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, List, Tuple

from .cleanup import remove_annotations
from .config import CuptToolsConfig
from .errors import CuptError
from .merging import merge_document
from .models import Document
from .parsing import read_cupt
from .rendering import write_cupt
from .stats import DocumentSummary, summarize_document

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class BatchFailure:
    """A file that could not be processed and the reason why."""

    doc_id: str
    message: str


@dataclass(slots=True)
class BatchResult:
    """Outcome of running one operation over a set of Cupt files."""

    processed: List[str] = field(default_factory=list)
    failures: List[BatchFailure] = field(default_factory=list)
    summaries: List[DocumentSummary] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def collect_input_files(
    input_path: Path, config: CuptToolsConfig
) -> List[Tuple[str, Path]]:
    """Expand the input path into (doc_id, path) pairs, sorted by doc_id."""
    if input_path.is_file():
        return [(input_path.name, input_path)]
    suffixes = {suffix.lower() for suffix in config.input_suffixes}
    files = sorted(
        p for p in input_path.rglob("*") if p.is_file() and p.suffix.lower() in suffixes
    )
    if not files:
        LOGGER.warning(
            "No files with suffixes %s found under %s", sorted(suffixes), input_path
        )
    # Relative paths as doc IDs so outputs mirror the input tree.
    return [(str(p.relative_to(input_path)), p) for p in files]


def load_documents(
    input_path: Path, config: CuptToolsConfig
) -> List[Tuple[str, Document]]:
    """Parse every input file; failures follow the ``fail_fast`` policy."""
    documents: List[Tuple[str, Document]] = []

    def _load(doc_id: str, path: Path) -> None:
        documents.append((doc_id, read_cupt(path, encoding=config.encoding)))

    _run_batch(collect_input_files(input_path, config), config, _load)
    return documents


def clean_document(document: Document, keep_types: List[str]) -> Document:
    """Apply :func:`remove_annotations` to every sentence of the document."""
    keep = frozenset(keep_types)
    return [
        [remove_annotations(keep, sentence) for sentence in paragraph]
        for paragraph in document
    ]


def clean_corpus(
    input_path: Path, output_path: Path, config: CuptToolsConfig
) -> BatchResult:
    """Strip MWE annotations not in ``config.keep_types`` and write the results."""

    def _clean(doc_id: str, path: Path) -> None:
        document = read_cupt(path, encoding=config.encoding)
        cleaned = clean_document(document, config.keep_types)
        write_cupt(cleaned, output_path / doc_id, encoding=config.encoding)

    return _run_batch(collect_input_files(input_path, config), config, _clean)


def merge_files(
    primary_path: Path,
    secondary_path: Path,
    output_path: Path,
    config: CuptToolsConfig,
) -> Document:
    """Merge two Cupt files over the same text and write the result."""
    primary = read_cupt(primary_path, encoding=config.encoding)
    secondary = read_cupt(secondary_path, encoding=config.encoding)
    merged = merge_document(primary, secondary)
    write_cupt(merged, output_path, encoding=config.encoding)
    LOGGER.info(
        "Merged %s into %s and wrote %s", primary_path, secondary_path, output_path
    )
    return merged


def summarize_corpus(input_path: Path, config: CuptToolsConfig) -> BatchResult:
    """Parse, decorate and count every input file."""
    summaries: List[DocumentSummary] = []

    def _summarize(doc_id: str, path: Path) -> None:
        document = read_cupt(path, encoding=config.encoding)
        summaries.append(summarize_document(doc_id, document))

    result = _run_batch(collect_input_files(input_path, config), config, _summarize)
    result.summaries = summaries
    return result


def validate_corpus(input_path: Path, config: CuptToolsConfig) -> BatchResult:
    """Check every input file, collecting all failures instead of stopping."""
    return summarize_corpus(input_path, replace(config, fail_fast=False))


def _run_batch(
    files: List[Tuple[str, Path]],
    config: CuptToolsConfig,
    handler: Callable[[str, Path], None],
) -> BatchResult:
    result = BatchResult()
    for doc_id, path in files:
        LOGGER.info("Processing %s", doc_id)
        try:
            handler(doc_id, path)
        except CuptError as exc:
            if config.fail_fast:
                raise
            LOGGER.error("Failed to process %s: %s", doc_id, exc)
            result.failures.append(BatchFailure(doc_id=doc_id, message=str(exc)))
            continue
        result.processed.append(doc_id)
    LOGGER.info(
        "Processed %d file(s), %d failure(s)",
        len(result.processed),
        len(result.failures),
    )
    return result
