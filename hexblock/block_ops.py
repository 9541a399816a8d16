"""Block operations on editor data: planning moves and copies, reversing, selecting."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class EditError(ValueError):
    """An edit request that cannot be carried out."""


class NotMovedError(EditError):
    """A move whose target is where the block already is."""


class TargetMode(enum.Enum):
    """How the target of a move or copy is given."""

    FIRST_POSITION = "first"
    """The target is the new offset of the block's first byte."""
    LAST_POSITION = "last"
    """The target is the new offset of the block's last byte."""
    RELATIVE = "relative"
    """The target is a distance from the block's first byte; may be negative."""


class Operation(enum.Enum):
    """Whether the block is moved or copied."""

    MOVE = "move"
    COPY = "copy"


@dataclass
class EditorState:
    """The data being edited together with caret, selection and undo history."""

    data: bytearray = field(default_factory=bytearray)
    cur_byte: int = 0
    cur_nibble: int = 0
    selected: bool = False
    start_of_selection: int = 0
    end_of_selection: int = 0
    move_pos: int = 0
    move_operation: Operation = Operation.MOVE
    changed: bool = False
    undo: list[tuple[int, int, bytes]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.data = bytearray(self.data)


@dataclass(frozen=True)
class MoveCopyPlan:
    """A validated move or copy: the inclusive block and where it goes."""

    start: int
    end: int
    target: int
    operation: Operation

    @property
    def length(self) -> int:
        return self.end - self.start + 1


def plan_move_copy(
    state: EditorState,
    first: int,
    second: int,
    target: int,
    second_is_length: bool = False,
    target_mode: TargetMode = TargetMode.FIRST_POSITION,
    operation: Operation = Operation.MOVE,
) -> MoveCopyPlan:
    """Validate a move or copy request and work out the block and target.

    ``second`` is the other end of the block, or with ``second_is_length`` a
    signed length counted from ``first``. The state's remembered target and
    operation are updated as the request is accepted.
    """
    if first < 0:
        raise EditError("negative start offset")
    if second < 0 and not second_is_length:
        raise EditError("negative end offset")
    if target < 0 and target_mode is not TargetMode.RELATIVE:
        raise EditError("negative target offset")

    size = len(state.data)
    start, end = first, second
    if second_is_length:
        if end == 0:
            raise EditError("block length must not be zero")
        end = end - 1 if end > 0 else end + 1
        end += start

    if not (0 <= start < size and 0 <= end < size):
        raise EditError("block lies outside the data")
    if start > end:
        start, end = end, start

    if target_mode is TargetMode.FIRST_POSITION:
        move_pos = target
    elif target_mode is TargetMode.LAST_POSITION:
        move_pos = start + target - end
    else:
        move_pos = start + target

    state.move_pos = move_pos
    state.move_operation = operation

    if move_pos == start and operation is Operation.MOVE:
        raise NotMovedError("the block would not be moved")

    if operation is Operation.MOVE:
        outside = move_pos + end - start >= size
    else:
        outside = move_pos > size
    if move_pos < 0 or outside:
        raise EditError("target lies outside the data")

    return MoveCopyPlan(start=start, end=end, target=move_pos, operation=operation)


def reverse_range(state: EditorState, start: int, end: int) -> tuple[int, int]:
    """Reverse the bytes between two inclusive offsets.

    An end beyond the data is cut back to the last byte. The selection is
    mirrored when it lies inside the range and dropped otherwise; without a
    selection a caret inside the range is mirrored. Returns the range reversed.
    """
    if start < 0:
        raise EditError("invalid start offset")
    if end < 0:
        raise EditError("invalid end offset")
    if start == end:
        raise EditError("cannot reverse a single byte")
    if not state.data:
        raise EditError("no data to reverse")
    if end < start:
        start, end = end, start

    last = len(state.data) - 1
    if start > last:
        raise EditError("block lies outside the data")
    end = min(end, last)

    old = bytes(state.data[start:end + 1])
    state.data[start:end + 1] = old[::-1]
    state.undo.append((start, end - start + 1, old))

    if state.selected:
        sel_start, sel_end = state.start_of_selection, state.end_of_selection
        if (
            start <= sel_start
            and start <= sel_end
            and end >= sel_start
            and end >= sel_end
        ):
            state.start_of_selection = end - sel_start + start
            state.end_of_selection = end - sel_end + start
        else:
            state.selected = False
    elif start <= state.cur_byte <= end:
        state.cur_byte = end - state.cur_byte + start
        state.cur_nibble = int(not state.cur_nibble)

    state.changed = True
    return start, end


def select_block(state: EditorState, start: int, end: int) -> tuple[int, int]:
    """Select between two offsets, clamping both into the data."""
    if not state.data:
        raise EditError("no data to select")
    last = len(state.data) - 1
    start = min(max(start, 0), last)
    end = min(max(end, 0), last)
    state.start_of_selection = start
    state.end_of_selection = end
    state.selected = True
    return start, end