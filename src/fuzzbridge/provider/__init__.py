"""Distance provider -- string metrics and edit descriptions via rapidfuzz.

Public API:
    get_provider           -- RapidFuzzProvider for a metric name
    distance / similarity  -- Raw scores for a metric
    normalized_distance    -- Distance rescaled to [0, 1]
    normalized_similarity  -- Similarity rescaled to [0, 1]
    get_editops            -- Sparse edit operations (1-based)
    get_opcodes            -- Contiguous edit regions (1-based, inclusive)
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .._types import EditOperation, Opcode
from ._metrics import (
    ALIGNMENT_BACKENDS,
    ALIGNMENT_METRICS,
    DEFAULT_METRIC,
    METRICS,
    resolve_metric,
)
from ._provider import (
    DistanceProvider,
    RapidFuzzProvider,
    editops_from_rapidfuzz,
    opcodes_from_rapidfuzz,
)

__all__ = [
    "get_provider",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "get_editops",
    "get_opcodes",
    "DistanceProvider",
    "RapidFuzzProvider",
    "editops_from_rapidfuzz",
    "opcodes_from_rapidfuzz",
    "resolve_metric",
    "METRICS",
    "ALIGNMENT_METRICS",
    "ALIGNMENT_BACKENDS",
    "DEFAULT_METRIC",
]


def get_provider(metric: str = DEFAULT_METRIC, **options: Any) -> RapidFuzzProvider:
    """Build a provider for ``metric``, forwarding metric keywords."""
    return RapidFuzzProvider(metric, **options)


def distance(
    s1: str, s2: str, metric: str = DEFAULT_METRIC,
    score_cutoff: Optional[float] = None, **options: Any,
) -> float:
    """Distance between two strings under ``metric``.

    Examples::

        >>> distance("kitten", "sitting")
        3
        >>> distance("ab", "ba", metric="osa")
        1
    """
    return get_provider(metric, **options).distance(s1, s2, score_cutoff)


def similarity(
    s1: str, s2: str, metric: str = DEFAULT_METRIC,
    score_cutoff: Optional[float] = None, **options: Any,
) -> float:
    """Similarity between two strings under ``metric``."""
    return get_provider(metric, **options).similarity(s1, s2, score_cutoff)


def normalized_distance(
    s1: str, s2: str, metric: str = DEFAULT_METRIC,
    score_cutoff: Optional[float] = None, **options: Any,
) -> float:
    """Normalized distance in [0, 1]."""
    return get_provider(metric, **options).normalized_distance(s1, s2, score_cutoff)


def normalized_similarity(
    s1: str, s2: str, metric: str = DEFAULT_METRIC,
    score_cutoff: Optional[float] = None, **options: Any,
) -> float:
    """Normalized similarity in [0, 1]."""
    return get_provider(metric, **options).normalized_similarity(s1, s2, score_cutoff)


def _pick_provider(
    metric: str, provider: Optional[DistanceProvider], options: Dict[str, Any],
) -> DistanceProvider:
    if provider is not None:
        return provider
    return get_provider(metric, **options)


def get_editops(
    s1: str, s2: str, metric: str = DEFAULT_METRIC,
    provider: Optional[DistanceProvider] = None, **options: Any,
) -> List[EditOperation]:
    """Edit operations turning ``s1`` into ``s2``.

    A ``provider`` overrides ``metric`` and ``options``.
    """
    return _pick_provider(metric, provider, options).editops(s1, s2)


def get_opcodes(
    s1: str, s2: str, metric: str = DEFAULT_METRIC,
    provider: Optional[DistanceProvider] = None, **options: Any,
) -> List[Opcode]:
    """Opcodes turning ``s1`` into ``s2``, without ``equal`` regions."""
    return _pick_provider(metric, provider, options).opcodes(s1, s2)
