"""Interactive view state: the matchup view cycle and the stats overlay.

Both are small immutable state values with pure transition functions, so
the dashboard can apply key actions as ``state = reduce(state, action)``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class KeyAction(Enum):
    NEXT_VIEW = "next_view"
    PREV_VIEW = "prev_view"
    TOGGLE_OVERLAY = "toggle_overlay"


@dataclass(frozen=True)
class ViewCycleState:
    """Cyclic index over ``size`` registered views."""

    size: int
    index: int = 0

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"view cycle needs at least one view, got {self.size}")
        if not 0 <= self.index < self.size:
            raise ValueError(f"view index {self.index} out of range 0..{self.size - 1}")


@dataclass(frozen=True)
class OverlayState:
    open: bool = False


def step(state: ViewCycleState, action: KeyAction) -> ViewCycleState:
    """Advance or retreat the view cycle, wrapping in both directions."""
    if action is KeyAction.NEXT_VIEW:
        return replace(state, index=(state.index + 1) % state.size)
    if action is KeyAction.PREV_VIEW:
        return replace(state, index=(state.index - 1 + state.size) % state.size)
    return state


def toggle(state: OverlayState, action: KeyAction) -> OverlayState:
    if action is KeyAction.TOGGLE_OVERLAY:
        return OverlayState(open=not state.open)
    return state


@dataclass(frozen=True)
class DashboardState:
    views: ViewCycleState
    overlay: OverlayState = field(default_factory=OverlayState)


def reduce(state: DashboardState, action: KeyAction) -> DashboardState:
    return DashboardState(
        views=step(state.views, action),
        overlay=toggle(state.overlay, action),
    )
