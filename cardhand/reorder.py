"""Insertion-index resolution for drag-to-reorder."""

import math
from typing import Sequence

from cardhand.layout import LayoutSlot
from cardhand.math_utils import clamp


def resolve_insert_index(
    pointer_x: float,
    slot_positions: Sequence[float],
    slot_count: int | None = None,
) -> int:
    """
    Convert a hand-local x position to the index a dropped card should take.

    The nearest slot wins, ties going to the earlier slot. A pointer strictly
    to the right of that slot inserts after it.

    Args:
        pointer_x: Pointer (or dragged card) x in hand-local space
        slot_positions: X positions of the other cards, dragged card excluded
        slot_count: Number of slots left once the dragged card is excluded;
            only that many positions are scanned. Defaults to all of them.

    Returns:
        Insertion index in [0, slot_count]. A pointer of +inf resolves to the
        end; -inf and NaN resolve to the start.
    """
    count = len(slot_positions) if slot_count is None else slot_count
    count = clamp(count, 0, len(slot_positions))
    if count == 0 or math.isnan(pointer_x):
        return 0
    if math.isinf(pointer_x):
        return count if pointer_x > 0 else 0

    nearest = 0
    best = abs(pointer_x - slot_positions[0])
    for i in range(1, count):
        dist = abs(pointer_x - slot_positions[i])
        if dist < best:
            best = dist
            nearest = i

    insert_at = nearest + 1 if pointer_x > slot_positions[nearest] else nearest
    return clamp(insert_at, 0, count)


def slot_positions_excluding(slots: Sequence[LayoutSlot], index: int) -> list[float]:
    """Return the x positions of every slot except ``index``."""
    return [slot.offset_x for i, slot in enumerate(slots) if i != index]
