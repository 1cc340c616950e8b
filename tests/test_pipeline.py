import pytest

from cupt_tools.config import CuptToolsConfig
from cupt_tools.errors import ConsistencyError, FormatError
from cupt_tools.parsing import parse_cupt, read_cupt
from cupt_tools.pipeline import (
    clean_corpus,
    collect_input_files,
    load_documents,
    merge_files,
    summarize_corpus,
    validate_corpus,
)
from tests.utils import SAMPLE_CUPT, cupt_line, write_sample_corpus


def test_collect_input_files_uses_relative_ids(tmp_path):
    corpus_dir = write_sample_corpus(tmp_path)
    files = collect_input_files(corpus_dir, CuptToolsConfig())
    assert [doc_id for doc_id, _ in files] == ["nested/dev.cupt", "train.cupt"]


def test_load_documents_single_file(tmp_path):
    corpus_dir = write_sample_corpus(tmp_path)
    documents = load_documents(corpus_dir / "train.cupt", CuptToolsConfig())
    assert [doc_id for doc_id, _ in documents] == ["train.cupt"]
    assert documents[0][1] == parse_cupt(SAMPLE_CUPT)


def test_clean_corpus_mirrors_input_tree(tmp_path):
    corpus_dir = write_sample_corpus(tmp_path)
    output_dir = tmp_path / "clean"
    config = CuptToolsConfig(keep_types=["VID"])
    result = clean_corpus(corpus_dir, output_dir, config)

    assert result.ok
    assert result.processed == ["nested/dev.cupt", "train.cupt"]
    dev = read_cupt(output_dir / "nested" / "dev.cupt")
    assert [t.mwe for t in dev[0][0]] == [((1, "VID"),), ((1, None),)]
    train = read_cupt(output_dir / "train.cupt")
    assert all(t.mwe == () for p in train for s in p for t in s)


def test_summarize_corpus_counts_mwes(tmp_path):
    corpus_dir = write_sample_corpus(tmp_path)
    result = summarize_corpus(corpus_dir, CuptToolsConfig())
    by_id = {summary.doc_id: summary for summary in result.summaries}
    train = by_id["train.cupt"]
    assert train.num_paragraphs == 2
    assert train.num_sentences == 2
    assert train.num_tokens == 11
    assert train.num_chosen_tokens == 10
    assert train.mwe_types == {"LVC.full": 1, "VPC.full": 1}
    assert by_id["nested/dev.cupt"].num_mwes == 1


def test_fail_fast_reraises(tmp_path):
    corpus_dir = write_sample_corpus(tmp_path)
    (corpus_dir / "broken.cupt").write_text("1\tbroken\n", encoding="utf-8")
    with pytest.raises(FormatError):
        summarize_corpus(corpus_dir, CuptToolsConfig())


def test_batch_collects_failures_without_fail_fast(tmp_path):
    corpus_dir = write_sample_corpus(tmp_path)
    (corpus_dir / "broken.cupt").write_text("1\tbroken\n", encoding="utf-8")
    (corpus_dir / "orphan.cupt").write_text(cupt_line("1", "a", "4") + "\n", encoding="utf-8")
    result = validate_corpus(corpus_dir, CuptToolsConfig())

    assert not result.ok
    assert [failure.doc_id for failure in result.failures] == ["broken.cupt", "orphan.cupt"]
    assert "wrong field count" in result.failures[0].message
    assert result.processed == ["nested/dev.cupt", "train.cupt"]


def test_merge_files_writes_output(tmp_path):
    primary = tmp_path / "primary.cupt"
    secondary = tmp_path / "secondary.cupt"
    primary.write_text(SAMPLE_CUPT, encoding="utf-8")
    secondary_text = "".join(
        line + "\n" for line in SAMPLE_CUPT.splitlines() if not line.startswith("1-2")
    )
    secondary.write_text(secondary_text, encoding="utf-8")
    output = tmp_path / "merged.cupt"

    merged = merge_files(primary, secondary, output, CuptToolsConfig())
    assert merged == parse_cupt(SAMPLE_CUPT)
    assert output.read_text(encoding="utf-8") == SAMPLE_CUPT


def test_merge_files_rejects_misaligned_inputs(tmp_path):
    primary = tmp_path / "primary.cupt"
    secondary = tmp_path / "secondary.cupt"
    primary.write_text(cupt_line("1", "a") + "\n", encoding="utf-8")
    secondary.write_text(cupt_line("1", "a") + "\n" + cupt_line("2", "b") + "\n", encoding="utf-8")
    with pytest.raises(ConsistencyError):
        merge_files(primary, secondary, tmp_path / "out.cupt", CuptToolsConfig())
