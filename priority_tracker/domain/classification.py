from __future__ import annotations

from .enums import Priority, Quadrant

_QUADRANTS = {
    (True, True): Quadrant.Q1,
    (False, True): Quadrant.Q2,
    (True, False): Quadrant.Q3,
    (False, False): Quadrant.Q4,
}


def quadrant_for(is_urgent: bool, is_important: bool) -> Quadrant:
    return _QUADRANTS[(bool(is_urgent), bool(is_important))]


def display_label(priority: Priority, sub_priority: int | None) -> str:
    if sub_priority is not None:
        return f"{priority.value}-{sub_priority}"
    return priority.value
