"""Rank candidate strings against a query.

Public API:
    extract_best_match       -- Highest-scoring candidate above the cutoff
    extract_similar_strings  -- Every candidate at or above the cutoff, input order
    extract_matches          -- Top-K candidates at or above the cutoff, best first

Query and candidates are normalized with
:func:`~fuzzbridge.normalize.process_string` before scoring; results always
carry the original candidate text.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Union

from ._types import RankingRequest, ScoredCandidate
from .fuzz import DEFAULT_SCORER, Scorer, ScorerFunc, resolve_scorer, scorer_name
from .normalize import process_string

logger = logging.getLogger(__name__)

ScorerArg = Union[str, Scorer, ScorerFunc]


def _build_request(
    query: str,
    choices: Iterable[str],
    score_cutoff: float,
    limit: int,
    processor: bool,
    asciify: bool,
    scorer: ScorerArg,
) -> RankingRequest:
    request = RankingRequest(
        query=query,
        candidates=tuple(choices),
        cutoff=score_cutoff,
        limit=limit,
        processor=processor,
        asciify=asciify,
        scorer=scorer_name(scorer),
    )
    logger.debug(
        "Ranking %d candidates for %r (scorer=%s, cutoff=%s, limit=%s)",
        len(request.candidates), request.query, request.scorer, request.cutoff, request.limit,
    )
    return request


def _score_all(
    request: RankingRequest, scorer_fn: ScorerFunc, workers: int,
) -> List[float]:
    """Score every candidate, returning scores in input order."""
    processed_query = process_string(request.query, request.processor, request.asciify)

    def score_one(choice: str) -> float:
        processed = process_string(choice, request.processor, request.asciify)
        return scorer_fn(processed_query, processed, score_cutoff=request.cutoff)

    if workers > 1 and len(request.candidates) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(score_one, request.candidates))
    return [score_one(choice) for choice in request.candidates]


def extract_best_match(
    query: str,
    choices: Sequence[str],
    score_cutoff: float = 50.0,
    processor: bool = True,
    asciify: bool = False,
    scorer: ScorerArg = DEFAULT_SCORER,
) -> Optional[ScoredCandidate]:
    """Find the single best match for ``query``.

    The running best score is handed to the scorer as its cutoff, so later
    candidates only need to beat the current best. A candidate must score
    strictly higher than both the cutoff and the current best; among equal
    scores the first candidate wins.

    Args:
        query: The string to match.
        choices: Candidate strings.
        score_cutoff: Score a match must exceed.
        processor: Trim and lowercase before scoring.
        asciify: Transliterate accented letters before scoring.
        scorer: Scorer name (see :class:`~fuzzbridge.fuzz.Scorer`) or a
            callable ``(s1, s2, *, score_cutoff) -> float``.

    Returns:
        The best :class:`ScoredCandidate`, or None if nothing qualifies.

    Raises:
        UnknownScorerError: If ``scorer`` names no registered scorer.
    """
    scorer_fn = resolve_scorer(scorer)
    request = _build_request(query, choices, score_cutoff, 0, processor, asciify, scorer)

    processed_query = process_string(request.query, request.processor, request.asciify)
    best_score = request.cutoff
    best_choice: Optional[str] = None

    for choice in request.candidates:
        processed = process_string(choice, request.processor, request.asciify)
        score = scorer_fn(processed_query, processed, score_cutoff=best_score)
        if score > best_score:
            best_score = score
            best_choice = choice

    if best_choice is None:
        logger.debug("No candidate exceeded cutoff %s", request.cutoff)
        return None
    return ScoredCandidate(text=best_choice, score=best_score)


def extract_similar_strings(
    query: str,
    choices: Sequence[str],
    score_cutoff: float = 50.0,
    processor: bool = True,
    asciify: bool = False,
    scorer: ScorerArg = DEFAULT_SCORER,
    workers: int = 1,
) -> List[ScoredCandidate]:
    """Return every candidate scoring at or above ``score_cutoff``.

    Results keep the order of ``choices``; they are not sorted by score.
    ``workers > 1`` scores candidates on a thread pool.

    Raises:
        UnknownScorerError: If ``scorer`` names no registered scorer.
    """
    scorer_fn = resolve_scorer(scorer)
    request = _build_request(query, choices, score_cutoff, 0, processor, asciify, scorer)
    scores = _score_all(request, scorer_fn, workers)

    matches = [
        ScoredCandidate(text=choice, score=score)
        for choice, score in zip(request.candidates, scores)
        if score >= request.cutoff
    ]
    logger.debug("%d of %d candidates matched", len(matches), len(request.candidates))
    return matches


def extract_matches(
    query: str,
    choices: Sequence[str],
    score_cutoff: float = 50.0,
    limit: int = 3,
    processor: bool = True,
    asciify: bool = False,
    scorer: ScorerArg = DEFAULT_SCORER,
    workers: int = 1,
) -> List[ScoredCandidate]:
    """Return the top ``limit`` candidates, best first.

    Candidates at or above ``score_cutoff`` are sorted by descending score.
    The sort is stable, so equal scores keep their input order.

    Args:
        query: The string to match.
        choices: Candidate strings.
        score_cutoff: Minimum score to keep a candidate.
        limit: Maximum number of results; 0 or less returns all of them.
        processor: Trim and lowercase before scoring.
        asciify: Transliterate accented letters before scoring.
        scorer: Scorer name or callable.
        workers: Thread pool size for scoring.

    Returns:
        List of :class:`ScoredCandidate`, highest score first.

    Raises:
        UnknownScorerError: If ``scorer`` names no registered scorer.
    """
    scorer_fn = resolve_scorer(scorer)
    request = _build_request(query, choices, score_cutoff, limit, processor, asciify, scorer)
    scores = _score_all(request, scorer_fn, workers)

    kept = [
        ScoredCandidate(text=choice, score=score)
        for choice, score in zip(request.candidates, scores)
        if score >= request.cutoff
    ]
    kept.sort(key=lambda m: m.score, reverse=True)

    if request.limit > 0:
        kept = kept[:request.limit]
    logger.debug("Returning %d of %d candidates", len(kept), len(request.candidates))
    return kept


# Short names
best_match = extract_best_match
all_matches = extract_similar_strings
top_k_matches = extract_matches
