"""FuzzBridge -- Fuzzy ranking and edit-script reconstruction on top of RapidFuzz.

Rank candidate strings against a query, or replay an edit description to
rebuild one string from another.

Quick start::

    from fuzzbridge import extract_matches, get_opcodes, apply_opcodes

    for match in extract_matches("fuzzy wuzzy", ["wuzzy fuzzy", "fuzzy wuzzy was a bear"]):
        print(match.text, match.score)

    ops = get_opcodes("kitten", "sitting")
    assert apply_opcodes(ops, "kitten", "sitting") == "sitting"
"""

__version__ = "0.1.0"

# Normalizer
from .normalize import process_string, normalize

# Reconstruction
from .reconstruct import (
    apply_editops,
    apply_editops_cells,
    apply_opcodes,
    apply_opcodes_cells,
)

# Ranking
from .extract import (
    extract_best_match,
    extract_similar_strings,
    extract_matches,
    best_match,
    all_matches,
    top_k_matches,
)

# Scorers
from .fuzz import (
    Scorer,
    fuzz_score,
    ratio,
    partial_ratio,
    token_sort_ratio,
    token_set_ratio,
    token_ratio,
    wratio,
    qratio,
)

# Distance provider
from .provider import (
    DistanceProvider,
    RapidFuzzProvider,
    get_provider,
    distance,
    similarity,
    normalized_distance,
    normalized_similarity,
    get_editops,
    get_opcodes,
)

# Types and errors
from ._types import EditKind, EditOperation, Opcode, ScoredCandidate, RankingRequest
from ._config import Settings, get_settings
from .exceptions import (
    FuzzBridgeError,
    EditScriptError,
    UnknownScorerError,
    UnknownMetricError,
    UnsupportedOperationError,
)

__all__ = [
    "__version__",
    # Normalizer
    "process_string",
    "normalize",
    # Reconstruction
    "apply_editops",
    "apply_editops_cells",
    "apply_opcodes",
    "apply_opcodes_cells",
    # Ranking
    "extract_best_match",
    "extract_similar_strings",
    "extract_matches",
    "best_match",
    "all_matches",
    "top_k_matches",
    # Scorers
    "Scorer",
    "fuzz_score",
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "token_set_ratio",
    "token_ratio",
    "wratio",
    "qratio",
    # Distance provider
    "DistanceProvider",
    "RapidFuzzProvider",
    "get_provider",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
    "get_editops",
    "get_opcodes",
    # Types
    "EditKind",
    "EditOperation",
    "Opcode",
    "ScoredCandidate",
    "RankingRequest",
    "Settings",
    "get_settings",
    # Errors
    "FuzzBridgeError",
    "EditScriptError",
    "UnknownScorerError",
    "UnknownMetricError",
    "UnsupportedOperationError",
]
