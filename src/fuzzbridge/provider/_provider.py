"""Distance provider protocol and its rapidfuzz implementation.

rapidfuzz reports edit descriptions with 0-based, half-open positions.
The provider converts them to the 1-based, inclusive records used at the
library boundary (see :mod:`fuzzbridge._types`).
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Protocol, runtime_checkable

from .._types import EditKind, EditOperation, Opcode
from ..exceptions import UnsupportedOperationError
from ._metrics import (
    ALIGNMENT_BACKENDS,
    ALIGNMENT_METRICS,
    DEFAULT_METRIC,
    metric_key,
    resolve_metric,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class DistanceProvider(Protocol):
    """What a distance backend must offer.

    ``get_editops`` and ``get_opcodes`` accept any object with these
    methods in place of a metric name.
    """

    def distance(self, s1: str, s2: str, score_cutoff: Optional[float] = None) -> float: ...

    def similarity(self, s1: str, s2: str, score_cutoff: Optional[float] = None) -> float: ...

    def normalized_distance(self, s1: str, s2: str, score_cutoff: Optional[float] = None) -> float: ...

    def normalized_similarity(self, s1: str, s2: str, score_cutoff: Optional[float] = None) -> float: ...

    def editops(self, s1: str, s2: str) -> List[EditOperation]: ...

    def opcodes(self, s1: str, s2: str) -> List[Opcode]: ...


def editops_from_rapidfuzz(ops: Iterable[Any]) -> List[EditOperation]:
    """Convert rapidfuzz ``Editop`` objects to 1-based :class:`EditOperation` rows."""
    converted = []
    for op in ops:
        kind = EditKind(op.tag)
        dest = None if kind is EditKind.DELETE else op.dest_pos + 1
        converted.append(EditOperation(
            kind=kind,
            source_position=op.src_pos + 1,
            dest_position=dest,
        ))
    return converted


def opcodes_from_rapidfuzz(ops: Iterable[Any]) -> List[Opcode]:
    """Convert rapidfuzz ``Opcode`` objects to 1-based inclusive :class:`Opcode` rows.

    ``equal`` regions are dropped; they are implied by the gaps.
    """
    converted = []
    for op in ops:
        if op.tag == EditKind.EQUAL.value:
            continue
        converted.append(Opcode(
            kind=op.tag,
            source_range=(op.src_start + 1, op.src_end),
            dest_range=(op.dest_start + 1, op.dest_end),
        ))
    return converted


class RapidFuzzProvider:
    """Distance provider backed by one ``rapidfuzz.distance`` metric.

    Args:
        metric: Registry name, e.g. ``"levenshtein"`` or ``"jaro_winkler"``.
        **options: Metric keywords forwarded on every call
            (``weights``, ``pad``, ``prefix_weight``, ...).

    ``osa`` has no alignment of its own; its edit descriptions come from
    ``lcs_seq``.
    """

    def __init__(self, metric: str = DEFAULT_METRIC, **options: Any):
        self.metric = metric_key(metric)
        self._module = resolve_metric(self.metric)
        self._alignment_module = resolve_metric(ALIGNMENT_BACKENDS.get(self.metric, self.metric))
        self._options = options
        # editops/opcodes only understand the padding flag
        self._alignment_options = {k: v for k, v in options.items() if k == "pad"}

    def __repr__(self) -> str:
        return f"RapidFuzzProvider(metric={self.metric!r})"

    @property
    def supports_alignment(self) -> bool:
        return self.metric in ALIGNMENT_METRICS

    def distance(self, s1: str, s2: str, score_cutoff: Optional[float] = None) -> float:
        return self._module.distance(s1, s2, score_cutoff=score_cutoff, **self._options)

    def similarity(self, s1: str, s2: str, score_cutoff: Optional[float] = None) -> float:
        return self._module.similarity(s1, s2, score_cutoff=score_cutoff, **self._options)

    def normalized_distance(self, s1: str, s2: str, score_cutoff: Optional[float] = None) -> float:
        return self._module.normalized_distance(s1, s2, score_cutoff=score_cutoff, **self._options)

    def normalized_similarity(self, s1: str, s2: str, score_cutoff: Optional[float] = None) -> float:
        return self._module.normalized_similarity(s1, s2, score_cutoff=score_cutoff, **self._options)

    def _require_alignment(self, what: str) -> None:
        if not self.supports_alignment:
            raise UnsupportedOperationError(
                f"Metric '{self.metric}' does not provide {what}. "
                f"Use one of: {', '.join(sorted(ALIGNMENT_METRICS))}"
            )

    def editops(self, s1: str, s2: str) -> List[EditOperation]:
        self._require_alignment("edit operations")
        ops = editops_from_rapidfuzz(self._alignment_module.editops(s1, s2, **self._alignment_options))
        logger.debug("%s editops: %d operations", self.metric, len(ops))
        return ops

    def opcodes(self, s1: str, s2: str) -> List[Opcode]:
        self._require_alignment("opcodes")
        ops = opcodes_from_rapidfuzz(self._alignment_module.opcodes(s1, s2, **self._alignment_options))
        logger.debug("%s opcodes: %d regions", self.metric, len(ops))
        return ops
