"""Note Ordering — pure planning of dense-position shifts within one category.

Invariants:
    - plan_reorder is PURE: returns a ShiftPlan descriptor, the shell applies it
    - from == to yields None (no writes at all)
    - Applying a plan to a dense permutation {0..N-1} yields a dense permutation
    - Exactly one bounded range shift + one point set per move

Design Decisions:
    - Dense integer keys over fractional/gap keys: every move costs a range-sized
      shift, but positions stay human-readable and renumbering is never needed
    - Range bounds as inclusive [low, high] so the shell maps them onto a single
      UPDATE ... WHERE position BETWEEN predicate
"""

from dataclasses import dataclass

from taskboard.core.errors import InvalidInputError


@dataclass(frozen=True)
class ShiftPlan:
    """Shift every other note with low <= position <= high by delta, then place the moved one."""
    low: int
    high: int
    delta: int
    target: int


def plan_reorder(position_from: int, position_to: int) -> ShiftPlan | None:
    """Compute the range shift for moving one note from position_from to position_to."""
    if position_to == position_from:
        return None
    if position_to > position_from:
        # Moving down: the notes in (from, to] close the gap upward.
        return ShiftPlan(
            low=position_from + 1, high=position_to, delta=-1, target=position_to,
        )
    # Moving up: the notes in [to, from) make room downward.
    return ShiftPlan(
        low=position_to, high=position_from - 1, delta=1, target=position_to,
    )


def plan_removal(position: int, count: int) -> ShiftPlan | None:
    """Renumber trailing notes after deleting the note at position."""
    if position >= count - 1:
        return None
    return ShiftPlan(low=position + 1, high=count - 1, delta=-1, target=position)


def check_positions_in_range(
    position_from: int, position_to: int, count: int,
) -> None:
    """Both ends of a move must lie within [0, count-1]."""
    for name, value in (
        ("positionMovedFrom", position_from), ("positionMovedTo", position_to),
    ):
        if not 0 <= value < count:
            raise InvalidInputError(
                f"{name}={value} outside 0..{count - 1}", field=name,
            )

