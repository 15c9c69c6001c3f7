"""Registry of rapidfuzz distance metrics."""
from __future__ import annotations

from types import ModuleType
from typing import Dict, FrozenSet

from rapidfuzz.distance import (
    OSA,
    DamerauLevenshtein,
    Hamming,
    Indel,
    Jaro,
    JaroWinkler,
    LCSseq,
    Levenshtein,
    Postfix,
    Prefix,
)

from ..exceptions import UnknownMetricError

DEFAULT_METRIC = "levenshtein"

METRICS: Dict[str, ModuleType] = {
    "levenshtein": Levenshtein,
    "damerau_levenshtein": DamerauLevenshtein,
    "osa": OSA,
    "indel": Indel,
    "lcs_seq": LCSseq,
    "hamming": Hamming,
    "jaro": Jaro,
    "jaro_winkler": JaroWinkler,
    "prefix": Prefix,
    "postfix": Postfix,
}

# Metrics without their own alignment borrow one from another module
ALIGNMENT_BACKENDS: Dict[str, str] = {
    "levenshtein": "levenshtein",
    "indel": "indel",
    "lcs_seq": "lcs_seq",
    "hamming": "hamming",
    "osa": "lcs_seq",
}

# Metrics that can emit editops/opcodes
ALIGNMENT_METRICS: FrozenSet[str] = frozenset(ALIGNMENT_BACKENDS)


def resolve_metric(name: str) -> ModuleType:
    """Look up a metric module by name (case and dash insensitive)."""
    key = name.strip().lower().replace("-", "_")
    try:
        return METRICS[key]
    except KeyError:
        raise UnknownMetricError(
            f"Unknown metric '{name}'. Choose from: {', '.join(sorted(METRICS))}"
        ) from None


def metric_key(name: str) -> str:
    """Canonical registry key for a metric name."""
    key = name.strip().lower().replace("-", "_")
    resolve_metric(key)
    return key
