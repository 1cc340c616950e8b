from __future__ import annotations

from pathlib import Path
from typing import Iterable

from cupt_tools.models import ROOT_ID, MweTag, SingleID, Token

# Two paragraphs, the second one starting with a multiword token range.
SAMPLE_CUPT = (
    "1\tHe\the\tPRON\tPRP\tCase=Nom|Number=Sing\t2\tnsubj\t_\t_\t*\n"
    "2\ttook\ttake\tVERB\tVBD\tMood=Ind|Tense=Past\t0\troot\t_\t_\t1:LVC.full\n"
    "3\ta\ta\tDET\tDT\tDefinite=Ind\t4\tdet\t_\t_\t*\n"
    "4\twalk\twalk\tNOUN\tNN\tNumber=Sing\t2\tobj\t_\tSpaceAfter=No\t1\n"
    "5\t.\t.\tPUNCT\t.\t_\t2\tpunct\t_\t_\t*\n"
    "\n"
    "1-2\tDon't\t_\t_\t_\t_\t_\t_\t_\t_\t*\n"
    "1\tDo\tdo\tAUX\tVBP\t_\t3\taux\t_\t_\t*\n"
    "2\tn't\tnot\tPART\tRB\t_\t3\tadvmod\t_\t_\t*\n"
    "3\tgive\tgive\tVERB\tVB\tVerbForm=Inf\t0\troot\t_\t_\t1:VPC.full\n"
    "4\tup\tup\tADP\tRP\t_\t3\tcompound:prt\t_\tSpaceAfter=No\t1\n"
    "5\t.\t.\tPUNCT\t.\t_\t3\tpunct\t_\t_\t*\n"
)

SAMPLE_HEADER = (
    "# global.columns = ID FORM LEMMA UPOS XPOS FEATS HEAD DEPREL DEPS MISC PARSEME:MWE\n"
)


def cupt_line(token_id: str, form: str, mwe: str = "*") -> str:
    """Build an 11-column Cupt line with placeholder annotation fields."""
    fields = [token_id, form, form.lower(), "X", "_", "_", "0", "dep", "_", "_", mwe]
    return "\t".join(fields)


def make_token(position: int, form: str = "w", mwe: Iterable[MweTag] = ()) -> Token:
    """Build a token at the given position with placeholder annotation fields."""
    return Token(
        id=SingleID(position),
        form=form,
        lemma=form.lower(),
        upos="X",
        xpos="_",
        feats=(),
        head=ROOT_ID,
        deprel="dep",
        deps="_",
        misc="_",
        mwe=tuple(mwe),
    )


def write_sample_corpus(root: Path) -> Path:
    """Create a corpus directory with one file at the top and one nested."""
    corpus_dir = root / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "train.cupt").write_text(SAMPLE_HEADER + SAMPLE_CUPT, encoding="utf-8")
    (corpus_dir / "nested" / "dev.cupt").write_text(
        "\n".join([cupt_line("1", "Kick", "1:VID"), cupt_line("2", "it", "1")]) + "\n",
        encoding="utf-8",
    )
    (corpus_dir / "notes.txt").write_text("not a cupt file", encoding="utf-8")
    return corpus_dir
