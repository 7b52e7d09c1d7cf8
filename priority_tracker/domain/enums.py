from __future__ import annotations

from enum import StrEnum


class Priority(StrEnum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    @property
    def description(self) -> str:
        return _PRIORITY_DESCRIPTIONS[self]

    @property
    def color_name(self) -> str:
        return _PRIORITY_COLORS[self]


class Quadrant(StrEnum):
    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"

    @property
    def title(self) -> str:
        return _QUADRANT_TITLES[self]

    @property
    def color_name(self) -> str:
        return _QUADRANT_COLORS[self]


class TaskFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


_PRIORITY_DESCRIPTIONS = {
    Priority.A: "Must Do - Serious consequences if not done",
    Priority.B: "Should Do - Mild consequences",
    Priority.C: "Nice to Do - No consequences",
    Priority.D: "Delegate - Can be done by someone else",
    Priority.E: "Eliminate - Should not be done",
}

_PRIORITY_COLORS = {
    Priority.A: "red",
    Priority.B: "orange",
    Priority.C: "yellow",
    Priority.D: "blue",
    Priority.E: "gray",
}

_QUADRANT_TITLES = {
    Quadrant.Q1: "Q1: Urgent & Important",
    Quadrant.Q2: "Q2: Not Urgent & Important",
    Quadrant.Q3: "Q3: Urgent & Not Important",
    Quadrant.Q4: "Q4: Not Urgent & Not Important",
}

_QUADRANT_COLORS = {
    Quadrant.Q1: "red",
    Quadrant.Q2: "green",
    Quadrant.Q3: "yellow",
    Quadrant.Q4: "gray",
}
