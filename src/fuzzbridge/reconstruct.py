"""Rebuild a target string from a source string and an edit description.

Two description shapes are supported:

- edit operations: sparse single-character Replace/Insert/Delete rows
- opcodes: contiguous Replace/Insert/Delete regions, with unchanged
  ("equal") regions implied by the gaps between them

Each comes in a string flavour and a cell flavour (a list of
single-character strings, one per output position).

Rows use 1-based positions and ``None`` for a missing bound. Descriptions
are replayed strictly: an unknown kind, a position outside either string,
or a row that moves backwards in the source raises
:class:`~fuzzbridge.exceptions.EditScriptError` and no partial result is
returned.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ._types import Bound, EditKind, EditOperation, Opcode
from .exceptions import EditScriptError

logger = logging.getLogger(__name__)

RowT = TypeVar("RowT", bound=BaseModel)
EditOpsInput = Iterable[Union[EditOperation, Any]]
OpcodesInput = Iterable[Union[Opcode, Any]]


def _coerce_row(model: Type[RowT], row: Any, row_number: int) -> RowT:
    """Validate one description row, reporting failures by row number."""
    if isinstance(row, model):
        return row
    try:
        return model.model_validate(row)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "row"
        raise EditScriptError(
            f"Invalid {model.__name__} at row {row_number}: {field}: {first.get('msg')}"
        ) from exc


def _position(value: Bound, length: int) -> int:
    """0-based index for a 1-based position; missing means end of string."""
    return length if value is None else value - 1


# -- Edit operations --

def _replay_editops(editops: EditOpsInput, source: str, target: str) -> List[str]:
    cells: List[str] = []
    cursor = 0
    count = 0

    for count, raw in enumerate(editops, start=1):
        op = _coerce_row(EditOperation, raw, count)
        if op.kind is EditKind.EQUAL:
            raise EditScriptError(f"Invalid operation type 'equal' at row {count}")

        src = _position(op.source_position, len(source))
        # Inserts may point one past the end (append); the others need a character
        src_limit = len(source) if op.kind is EditKind.INSERT else len(source) - 1
        if not 0 <= src <= src_limit:
            raise EditScriptError(
                f"Source position {op.source_position} out of range at row {count} "
                f"(source length {len(source)})"
            )
        if src < cursor:
            raise EditScriptError(
                f"Operation at row {count} moves backwards: source position "
                f"{src + 1} is before {cursor + 1}"
            )

        cells.extend(source[cursor:src])
        cursor = src

        if op.kind in (EditKind.REPLACE, EditKind.INSERT):
            dest = _position(op.dest_position, len(target))
            if not 0 <= dest < len(target):
                raise EditScriptError(
                    f"Destination position {op.dest_position} out of range at row {count} "
                    f"(target length {len(target)})"
                )
            cells.append(target[dest])

        if op.kind in (EditKind.REPLACE, EditKind.DELETE):
            cursor += 1

    cells.extend(source[cursor:])
    logger.debug("Replayed %d edit operations: %d -> %d cells", count, len(source), len(cells))
    return cells


def apply_editops(editops: EditOpsInput, source: str, target: str) -> str:
    """Apply edit operations to ``source``.

    Args:
        editops: :class:`EditOperation` instances or mapping rows with
            ``kind``/``source_position``/``dest_position`` (``type``,
            ``src_pos`` and ``dest_pos`` are accepted too), sorted by
            source position.
        source: The string being edited.
        target: The string that supplies inserted and replacement characters.

    Returns:
        The reconstructed string.

    Raises:
        EditScriptError: If a row is malformed, out of range or out of order.

    Example::

        >>> ops = [{"kind": "replace", "source_position": 1, "dest_position": 1}]
        >>> apply_editops(ops, "cat", "bat")
        'bat'
    """
    return "".join(_replay_editops(editops, source, target))


def apply_editops_cells(editops: EditOpsInput, source: str, target: str) -> List[str]:
    """Like :func:`apply_editops`, but return one single-character cell per position."""
    return _replay_editops(editops, source, target)


# -- Opcodes --

def _span(bounds: Tuple[Bound, Bound], length: int, side: str, row_number: int) -> Tuple[int, int]:
    """Resolve an inclusive 1-based range to a half-open 0-based ``(start, stop)``."""
    begin, end = bounds
    start = 0 if begin is None else begin - 1
    stop = length if end is None else end
    if not 0 <= start <= stop <= length:
        raise EditScriptError(
            f"{side} range {_format_range(bounds)} out of range at row {row_number} "
            f"({side.lower()} length {length})"
        )
    return start, stop


def _format_range(bounds: Tuple[Optional[int], Optional[int]]) -> str:
    begin, end = ("NA" if b is None else str(b) for b in bounds)
    return f"[{begin}, {end}]"


def _replay_opcodes(opcodes: OpcodesInput, source: str, target: str) -> List[str]:
    cells: List[str] = []
    cursor = 0
    count = 0

    for count, raw in enumerate(opcodes, start=1):
        op = _coerce_row(Opcode, raw, count)
        src_start, src_stop = _span(op.source_range, len(source), "Source", count)

        if src_start < cursor:
            raise EditScriptError(
                f"Opcode at row {count} overlaps the previous region: source begins at "
                f"{src_start + 1}, already consumed through {cursor}"
            )

        # Implicit equal region
        cells.extend(source[cursor:src_start])
        cursor = src_start

        if op.kind is EditKind.EQUAL:
            cells.extend(source[src_start:src_stop])
            cursor = src_stop
            continue

        if op.kind in (EditKind.REPLACE, EditKind.INSERT):
            dest_start, dest_stop = _span(op.dest_range, len(target), "Destination", count)
            cells.extend(target[dest_start:dest_stop])

        if op.kind in (EditKind.REPLACE, EditKind.DELETE):
            cursor = src_stop

    cells.extend(source[cursor:])
    logger.debug("Replayed %d opcodes: %d -> %d cells", count, len(source), len(cells))
    return cells


def apply_opcodes(opcodes: OpcodesInput, source: str, target: str) -> str:
    """Apply opcodes to ``source``.

    Source characters not covered by any opcode are copied unchanged. An
    empty opcode list returns ``source``.

    Args:
        opcodes: :class:`Opcode` instances or mapping rows with ``kind``,
            ``source_range`` and ``dest_range`` (flat ``src_begin``,
            ``src_end``, ``dest_begin``, ``dest_end`` keys are accepted).
            A missing begin means the start of the string, a missing end
            the end of it.
        source: The string being edited.
        target: The string that supplies inserted and replacement characters.

    Returns:
        The reconstructed string.

    Raises:
        EditScriptError: If a row is malformed, out of range or overlaps
            an earlier row.
    """
    return "".join(_replay_opcodes(opcodes, source, target))


def apply_opcodes_cells(opcodes: OpcodesInput, source: str, target: str) -> List[str]:
    """Like :func:`apply_opcodes`, but return one single-character cell per position."""
    return _replay_opcodes(opcodes, source, target)
