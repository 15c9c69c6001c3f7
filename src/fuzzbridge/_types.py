"""Shared record types for the fuzzbridge library.

Edit descriptions use 1-based, inclusive positions at this boundary, and
``None`` where a position is missing. The reconstruction engine resolves
them to concrete 0-based indices on entry.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


Bound = Optional[int]


class EditKind(str, Enum):
    """Kind of a single edit operation or opcode region."""

    REPLACE = "replace"
    INSERT = "insert"
    DELETE = "delete"
    EQUAL = "equal"


def _lower_kind(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _first_present(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


# -- Edit description types --

class EditOperation(BaseModel):
    """One atomic edit, as produced by a sparse diff.

    For inserts, ``source_position`` names the source character the new
    character is placed before; ``len(source) + 1`` appends.
    """

    model_config = ConfigDict(frozen=True)

    kind: EditKind = Field(
        validation_alias=AliasChoices("kind", "type", "operation"),
        description="replace, insert or delete",
    )
    source_position: Bound = Field(
        default=None,
        validation_alias=AliasChoices("source_position", "src_pos"),
        description="1-based position in the source string",
    )
    dest_position: Bound = Field(
        default=None,
        validation_alias=AliasChoices("dest_position", "dest_pos", "destination_position"),
        description="1-based position in the target string",
    )

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, value: Any) -> Any:
        return _lower_kind(value)


class Opcode(BaseModel):
    """One contiguous edit region, as produced by a range diff.

    Ranges are ``(begin, end)``, 1-based and inclusive. An empty range is
    written ``(b, b - 1)``; either bound may be ``None``.
    """

    model_config = ConfigDict(frozen=True)

    kind: EditKind = Field(
        validation_alias=AliasChoices("kind", "type", "operation", "tag"),
        description="replace, insert, delete or equal",
    )
    source_range: Tuple[Bound, Bound] = Field(default=(None, None))
    dest_range: Tuple[Bound, Bound] = Field(default=(None, None))

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, value: Any) -> Any:
        return _lower_kind(value)

    @model_validator(mode="before")
    @classmethod
    def fold_flat_bounds(cls, data: Any) -> Any:
        """Accept flat ``src_begin``/``src_end``/``dest_begin``/``dest_end`` rows."""
        if not isinstance(data, Mapping):
            return data
        folded = dict(data)
        if "source_range" not in folded:
            folded["source_range"] = (
                _first_present(data, "src_begin", "source_begin"),
                _first_present(data, "src_end", "source_end"),
            )
        if "dest_range" not in folded:
            folded["dest_range"] = (
                _first_present(data, "dest_begin", "destination_begin"),
                _first_present(data, "dest_end", "destination_end"),
            )
        for key in ("src_begin", "src_end", "source_begin", "source_end",
                    "dest_begin", "dest_end", "destination_begin", "destination_end"):
            folded.pop(key, None)
        return folded


# -- Ranking types --

class ScoredCandidate(BaseModel):
    """A candidate paired with its similarity score."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="The original, unnormalized candidate")
    score: float


class RankingRequest(BaseModel):
    """Parameters of a single ranking call."""

    model_config = ConfigDict(frozen=True)

    query: str
    candidates: Tuple[str, ...] = ()
    cutoff: float = 50.0
    limit: int = 0
    processor: bool = True
    asciify: bool = False
    scorer: str = "WRatio"
