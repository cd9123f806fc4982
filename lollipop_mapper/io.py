"""Data loading utilities for mutation diagrams.

Reads tab-delimited mutation files (one mutation per row, header required)
into :class:`MutationRecord` objects, and exports pileups for tables.
"""

from __future__ import annotations

import io
import itertools
import logging
from typing import Iterable, List

import pandas as pd

from .model import MutationRecord, Pileup

logger = logging.getLogger(__name__)

# record field -> column name (column names are matched case-insensitively)
HEADER_MAP = {
    "gene_symbol": "hugo_symbol",
    "mutation_id": "mutation_id",
    "mutation_sid": "mutation_sid",
    "protein_change": "protein_change",
    "mutation_type": "mutation_type",
    "cancer_type": "cancer_type",
    "protein_pos_start": "protein_position_start",
    "protein_pos_end": "protein_position_end",
    "case_id": "sample_id",
}

_id_counter = itertools.count(1)


def _next_mutation_id() -> str:
    return f"stalone_mut_{next(_id_counter)}"


def read_mutation_table(source) -> pd.DataFrame:
    """Read a tab-delimited mutation table into a DataFrame of strings.

    Parameters
    ----------
    source : str or file-like
        Path or buffer. The first line is the header.

    Returns
    -------
    pd.DataFrame
        All values as stripped strings (missing -> ``''``); column names
        lower-cased.
    """
    df = pd.read_csv(
        source,
        sep="\t",
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
    )
    df.columns = [str(c).strip().lower() for c in df.columns]
    for column in df.columns:
        df[column] = df[column].astype(str).str.strip()
    return df


def records_from_dataframe(df: pd.DataFrame) -> List[MutationRecord]:
    """Convert mutation table rows into :class:`MutationRecord` objects.

    A missing ``mutation_id`` is generated; a missing ``mutation_sid``
    defaults to the ``mutation_id``. Columns outside :data:`HEADER_MAP` are
    kept in ``extra``.
    """
    known_columns = set(HEADER_MAP.values())
    extra_columns = [c for c in df.columns if c not in known_columns]

    records = []
    for row in df.to_dict(orient="records"):
        attributes = {}
        for attr, column in HEADER_MAP.items():
            value = row.get(column)
            if value is not None and value != "":
                attributes[attr] = value

        attributes.setdefault("mutation_id", _next_mutation_id())
        attributes.setdefault("mutation_sid", attributes["mutation_id"])
        attributes["extra"] = {c: row[c] for c in extra_columns if row[c] != ""}
        records.append(MutationRecord(**attributes))

    logger.debug("Parsed %d mutation records", len(records))
    return records


def load_mutations(path: str) -> List[MutationRecord]:
    """Load mutation records from a tab-delimited file at *path*."""
    return records_from_dataframe(read_mutation_table(path))


def parse_mutation_input(text: str) -> List[MutationRecord]:
    """Parse tab-delimited mutation data given as a string."""
    if not text.strip():
        return []
    return records_from_dataframe(read_mutation_table(io.StringIO(text)))


def sample_list(records: Iterable[MutationRecord]) -> List[str]:
    """Distinct sample ids, in order of first appearance."""
    return list(dict.fromkeys(r.case_id for r in records if r.case_id))


def gene_list(records: Iterable[MutationRecord]) -> List[str]:
    """Distinct upper-cased gene symbols, in order of first appearance."""
    return list(dict.fromkeys(r.gene_symbol.upper() for r in records if r.gene_symbol))


def records_to_dataframe(records: Iterable[MutationRecord]) -> pd.DataFrame:
    """One row per record, including the resolved protein position."""
    return pd.DataFrame(
        [
            {
                "mutation_id": r.mutation_id,
                "mutation_sid": r.mutation_sid,
                "gene_symbol": r.gene_symbol,
                "protein_change": r.protein_change,
                "mutation_type": r.mutation_type,
                "cancer_type": r.cancer_type,
                "case_id": r.case_id,
                "position": r.protein_start_position,
            }
            for r in records
        ],
        columns=[
            "mutation_id", "mutation_sid", "gene_symbol", "protein_change",
            "mutation_type", "cancer_type", "case_id", "position",
        ],
    )


def pileups_to_dataframe(pileups: Iterable[Pileup]) -> pd.DataFrame:
    """Summarise *pileups* (in their given order) for tabular display."""
    return pd.DataFrame(
        [
            {
                "pileup_id": p.pileup_id,
                "location": p.location,
                "count": p.count,
                "label": p.label,
                "top_cancer_type": p.stats[0].cancer_type if p.stats else None,
            }
            for p in pileups
        ],
        columns=["pileup_id", "location", "count", "label", "top_cancer_type"],
    )
