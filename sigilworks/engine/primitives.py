"""Path primitives and the budget-bounded builder grammars draw into."""

from __future__ import annotations

from dataclasses import dataclass, field

from sigilworks.svg.serializer import serialize_path
from sigilworks.utils.geometry import Point


@dataclass(frozen=True)
class Primitive:
    """One move-then-line mark: ``M start L end``."""

    kind: str
    start: Point
    end: Point


@dataclass
class PathBuilder:
    """Append-only primitive sequence with a hard budget.

    Once ``budget`` primitives have been emitted every further ``line`` is a
    no-op returning False, so grammars can stop mid-construction.
    """

    budget: int
    precision: int = 2
    primitives: list[Primitive] = field(default_factory=list)

    @property
    def remaining(self) -> int:
        return max(0, self.budget - len(self.primitives))

    @property
    def full(self) -> bool:
        return self.remaining == 0

    def line(self, start: Point, end: Point) -> bool:
        if self.full:
            return False
        self.primitives.append(Primitive(kind="line", start=start, end=end))
        return True

    def cross(self, center: Point, half: float) -> int:
        """Upright cross: vertical then horizontal stroke. Returns primitives emitted."""
        emitted = 0
        if self.line(Point(center.x, center.y - half), Point(center.x, center.y + half)):
            emitted += 1
        if self.line(Point(center.x - half, center.y), Point(center.x + half, center.y)):
            emitted += 1
        return emitted

    def x_mark(self, center: Point, half: float) -> int:
        """Diagonal cross. Returns primitives emitted."""
        emitted = 0
        if self.line(Point(center.x - half, center.y - half), Point(center.x + half, center.y + half)):
            emitted += 1
        if self.line(Point(center.x + half, center.y - half), Point(center.x - half, center.y + half)):
            emitted += 1
        return emitted

    def to_path_data(self) -> str:
        return serialize_path(self.primitives, self.precision)
