"""Fan layout geometry for a hand of cards."""

from dataclasses import dataclass
from enum import Enum

from cardhand.math_utils import centered_offset

# Card width used when artwork provides none.
DEFAULT_CARD_WIDTH = 140.0


class LayoutMode(Enum):
    """How x positions are derived from spacing."""

    # Step between card centers is the spacing itself.
    MANUAL = "manual"
    # Centered row of fixed-width cards; spacing is the gap between edges
    # (negative to overlap).
    ROW = "row"


@dataclass(frozen=True)
class LayoutSlot:
    """Position and rotation for one hand index. Derived, never identity-bearing."""

    offset_x: float
    rotation: float


@dataclass(frozen=True)
class LayoutParams:
    """Parameters for laying out a hand."""

    spacing: float = -120.0
    fan_angle: float = 8.0
    mode: LayoutMode = LayoutMode.ROW
    card_width: float = DEFAULT_CARD_WIDTH

    @property
    def step(self) -> float:
        """Distance between neighbouring card centers."""
        if self.mode is LayoutMode.ROW:
            return self.card_width + self.spacing
        return self.spacing


def slot_for(index: int, count: int, spacing: float, fan_angle: float) -> LayoutSlot:
    """
    Compute the slot for one card of a fanned hand.

    The row is centered on zero and the fan is symmetric, so the middle
    card of an odd-sized hand sits at (0, 0).

    Args:
        index: Hand index of the card
        count: Number of cards in the hand
        spacing: Signed distance between neighbouring card centers
        fan_angle: Signed rotation step between neighbouring cards, in degrees

    Returns:
        The card's LayoutSlot
    """
    if not 0 <= index < count:
        raise IndexError(f"Slot {index} out of range for {count} cards")
    return LayoutSlot(
        offset_x=centered_offset(index, count, spacing),
        rotation=centered_offset(index, count, fan_angle),
    )


def fan_layout(count: int, spacing: float, fan_angle: float) -> list[LayoutSlot]:
    """Compute every slot of a fanned hand. An empty hand has no slots."""
    return [slot_for(i, count, spacing, fan_angle) for i in range(max(0, count))]


def row_positions(count: int, step: float) -> list[float]:
    """Phase one: x positions of a centered row."""
    return [centered_offset(i, count, step) for i in range(max(0, count))]


def fan_rotations(count: int, fan_angle: float) -> list[float]:
    """Phase two: rotations for a row whose positions are already final."""
    return [centered_offset(i, count, fan_angle) for i in range(max(0, count))]


def layout_hand(count: int, params: LayoutParams) -> list[LayoutSlot]:
    """
    Lay out a hand in two phases: positions first, then rotations.

    Both phases are pure, so the result is ready to commit to a renderer
    in one go.
    """
    positions = row_positions(count, params.step)
    rotations = fan_rotations(len(positions), params.fan_angle)
    return [LayoutSlot(x, angle) for x, angle in zip(positions, rotations)]
