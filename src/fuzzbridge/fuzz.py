"""Named similarity scorers used by the ranking pipeline.

All scorers return a similarity on a 0-100 scale and accept a
``score_cutoff``; scores below the cutoff come back as 0.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Union

from rapidfuzz import fuzz as _rf_fuzz

from .exceptions import UnknownScorerError

ScorerFunc = Callable[..., float]


class Scorer(str, Enum):
    """Scorers selectable by name."""

    WRATIO = "WRatio"
    RATIO = "Ratio"
    PARTIAL_RATIO = "PartialRatio"
    TOKEN_SORT_RATIO = "TokenSortRatio"
    TOKEN_SET_RATIO = "TokenSetRatio"
    TOKEN_RATIO = "TokenRatio"
    QRATIO = "QRatio"


DEFAULT_SCORER = Scorer.WRATIO

_SCORERS: Dict[Scorer, ScorerFunc] = {
    Scorer.WRATIO: _rf_fuzz.WRatio,
    Scorer.RATIO: _rf_fuzz.ratio,
    Scorer.PARTIAL_RATIO: _rf_fuzz.partial_ratio,
    Scorer.TOKEN_SORT_RATIO: _rf_fuzz.token_sort_ratio,
    Scorer.TOKEN_SET_RATIO: _rf_fuzz.token_set_ratio,
    Scorer.TOKEN_RATIO: _rf_fuzz.token_ratio,
    Scorer.QRATIO: _rf_fuzz.QRatio,
}

# "wratio", "partial_ratio", "token-sort-ratio" ... all resolve
_LOOKUP: Dict[str, Scorer] = {
    s.value.lower(): s for s in Scorer
}


def _lookup_key(name: str) -> str:
    return name.strip().replace("_", "").replace("-", "").lower()


def scorer_name(scorer: Union[str, Scorer, ScorerFunc]) -> str:
    """Display name of a scorer: the registry name or the callable's name."""
    if isinstance(scorer, (str, Scorer)):
        return resolve_scorer_enum(scorer).value
    return getattr(scorer, "__name__", type(scorer).__name__)


def resolve_scorer_enum(scorer: Union[str, Scorer]) -> Scorer:
    """Map a scorer name to its :class:`Scorer` member.

    Raises:
        UnknownScorerError: If the name is not registered.
    """
    if isinstance(scorer, Scorer):
        return scorer
    member = _LOOKUP.get(_lookup_key(scorer))
    if member is None:
        raise UnknownScorerError(
            f"Unknown scorer '{scorer}'. Choose from: {', '.join(s.value for s in Scorer)}"
        )
    return member


def resolve_scorer(scorer: Union[str, Scorer, ScorerFunc]) -> ScorerFunc:
    """Return the scoring callable for a name, enum member or callable.

    Callables are passed through unchanged; they must accept
    ``(s1, s2, *, score_cutoff)`` like the rapidfuzz scorers.
    """
    if isinstance(scorer, (str, Scorer)):
        return _SCORERS[resolve_scorer_enum(scorer)]
    if callable(scorer):
        return scorer
    raise UnknownScorerError(f"Scorer must be a name or a callable, got {type(scorer).__name__}")


def fuzz_score(
    s1: str, s2: str,
    scorer: Union[str, Scorer, ScorerFunc] = DEFAULT_SCORER,
    score_cutoff: float = 0.0,
) -> float:
    """Score one pair of strings with the selected scorer."""
    return resolve_scorer(scorer)(s1, s2, score_cutoff=score_cutoff)


def ratio(s1: str, s2: str, score_cutoff: float = 0.0) -> float:
    """Normalized Indel similarity, 0-100."""
    return fuzz_score(s1, s2, Scorer.RATIO, score_cutoff)


def partial_ratio(s1: str, s2: str, score_cutoff: float = 0.0) -> float:
    """Best ratio of the shorter string against any equal-length window of the longer."""
    return fuzz_score(s1, s2, Scorer.PARTIAL_RATIO, score_cutoff)


def token_sort_ratio(s1: str, s2: str, score_cutoff: float = 0.0) -> float:
    """Ratio after sorting the words of both strings."""
    return fuzz_score(s1, s2, Scorer.TOKEN_SORT_RATIO, score_cutoff)


def token_set_ratio(s1: str, s2: str, score_cutoff: float = 0.0) -> float:
    """Ratio over the shared and differing word sets."""
    return fuzz_score(s1, s2, Scorer.TOKEN_SET_RATIO, score_cutoff)


def token_ratio(s1: str, s2: str, score_cutoff: float = 0.0) -> float:
    """Maximum of the token sort and token set ratios."""
    return fuzz_score(s1, s2, Scorer.TOKEN_RATIO, score_cutoff)


def wratio(s1: str, s2: str, score_cutoff: float = 0.0) -> float:
    """Weighted combination of the ratios above, scaled by length difference."""
    return fuzz_score(s1, s2, Scorer.WRATIO, score_cutoff)


def qratio(s1: str, s2: str, score_cutoff: float = 0.0) -> float:
    """Ratio that returns 0 when either string is empty."""
    return fuzz_score(s1, s2, Scorer.QRATIO, score_cutoff)
