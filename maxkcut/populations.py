"""Ordered pools of candidate inequalities and ranked vertices."""

from __future__ import annotations

import math
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Generic, Iterator, Sequence, TypeVar

from .util import ExceptionType, MKCError

T = TypeVar("T")


class _OrderedPool(Generic[T]):
    """Items kept sorted by key; a new item goes before existing items with an equal key."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._keys: list[float] = []

    def _insert(self, item: T, key: float) -> None:
        pos = bisect_left(self._keys, key)
        self._keys.insert(pos, key)
        self._items.insert(pos, item)

    def _pop_last(self) -> None:
        self._keys.pop()
        self._items.pop()

    def _item(self, index: int, what: str) -> T:
        if not 0 <= index < len(self._items):
            raise MKCError(f"{what}: index {index} out of range", ExceptionType.STOP_EXECUTION)
        return self._items[index]

    def clear(self) -> None:
        self._items.clear()
        self._keys.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


@dataclass(frozen=True)
class ConstraintSelection:
    """A separated inequality with its normalised gap (violation over |rhs|)."""

    origin_sep: int
    origin_pos: int
    gap: float
    violation: float
    rhs: float

    def __post_init__(self) -> None:
        if self.gap < 0:
            raise MKCError(
                "GAP from an inequality is inferior than zero", ExceptionType.STOP_EXECUTION
            )

    def __str__(self) -> str:
        return f"{self.origin_sep} | {self.origin_pos} | {self.gap} | {self.violation} | {self.rhs}"


class SelectionPopulation(_OrderedPool[ConstraintSelection]):
    """Inequalities ordered by decreasing gap, optionally capped in size."""

    def __init__(self, max_size: int = 0) -> None:
        super().__init__()
        self.max_size = max_size

    def add(self, element: ConstraintSelection) -> bool:
        """Insert ``element``; drop the smallest gap when the cap is exceeded."""
        self._insert(element, -element.gap)
        if len(self) > self.max_size:
            self._pop_last()
        return True

    def add_inequality(
        self, origin_sep: int, origin_pos: int, violation: float, rhs: float
    ) -> ConstraintSelection:
        """Insert an inequality without applying the cap and return it."""
        divisor = abs(rhs)
        gap = violation / divisor if divisor else math.copysign(math.inf, violation)
        element = ConstraintSelection(origin_sep, origin_pos, gap, violation, rhs)
        self._insert(element, -gap)
        return element

    def top(self, count: int) -> list[ConstraintSelection]:
        """Return the elements at positions 0 to ``count`` inclusive."""
        return self._items[: count + 1]

    def clear(self) -> None:
        super().clear()
        self.max_size = 0

    def __getitem__(self, index: int) -> ConstraintSelection:
        return self._item(index, "SelectionPopulation")

    def __len__(self) -> int:
        return super().__len__()

    def __str__(self) -> str:
        lines = [
            f"Print elements of SelectionPopulation, size = {len(self)}",
            "Orig. Sep | Orig. Pos | gap | viol | b  ",
        ]
        lines.extend(str(element) for element in self)
        return "\n".join(lines) + "\n"


@dataclass
class LPtoSDPConstraint:
    """An eigenpair of a matrix that may give an LP cut from the SDP condition."""

    eigenvector: list[float]
    eigenvalue: float
    negative: bool

    def __str__(self) -> str:
        body = "".join(f"{value} " for value in self.eigenvector)
        return f"{{ {body}}} | eigVal = {self.eigenvalue}"


class LPtoSDPPopulation(_OrderedPool[LPtoSDPConstraint]):
    """Eigenpairs ordered by increasing eigenvalue."""

    def add(self, vector: Sequence[float], eigenvalue: float, negative: bool) -> bool:
        self._insert(LPtoSDPConstraint(list(vector), eigenvalue, negative), eigenvalue)
        return True

    def eigenvalue(self, index: int) -> float:
        return self._item(index, "LPtoSDPPopulation").eigenvalue

    def vector(self, index: int) -> list[float]:
        return list(self._item(index, "LPtoSDPPopulation").eigenvector)

    def is_negative(self, index: int) -> bool:
        """Return the stored flag, or False when ``index`` is out of range."""
        if 0 <= index < len(self):
            return self._items[index].negative
        return False

    def negative_eigenpairs(self, tol: float) -> list[tuple[float, list[float]]]:
        """Return ``(eigenvalue, vector)`` for the leading eigenvalues below ``-tol``."""
        pairs = []
        for item in self:
            if item.eigenvalue >= -tol:
                break
            pairs.append((item.eigenvalue, list(item.eigenvector)))
        return pairs

    def clear(self) -> None:
        super().clear()

    def __len__(self) -> int:
        return super().__len__()

    def __str__(self) -> str:
        lines = ["Elements of LPtoSDPPopulation:", "seq | vec | eigenvalue"]
        lines.extend(f"{number}| {item}" for number, item in enumerate(self, start=1))
        return "\n".join(lines) + "\n"


@dataclass
class CliqueConstraint:
    """A clique inequality over ``vertices`` with its left-hand sum and right-hand side."""

    vertices: list[int]
    total: float
    rhs: float = 0.0
    q: int = field(init=False)

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.q = len(self.vertices)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CliqueConstraint):
            return NotImplemented
        return self.q == other.q and self.total == other.total and self.vertices == other.vertices

    __hash__ = None


class CliquePopulation(_OrderedPool[CliqueConstraint]):
    """Clique inequalities ordered by increasing sum."""

    def add(self, vertices: Sequence[int], q: int, total: float, rhs: float) -> CliqueConstraint:
        """Insert a clique; its size is taken from ``vertices``, ``q`` is informative only."""
        constraint = CliqueConstraint(list(vertices), total, rhs)
        self._insert(constraint, total)
        return constraint

    def vertices(self, index: int) -> list[int]:
        return list(self[index].vertices)

    def clear(self) -> None:
        super().clear()

    def __getitem__(self, index: int) -> CliqueConstraint:
        return self._item(index, "CliquePopulation")

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[CliqueConstraint]:
        return super().__iter__()

    def __str__(self) -> str:
        lines = [f"Elements of CliquePopulation: ... {len(self)}"]
        for number, item in enumerate(self):
            body = ", ".join(str(v) for v in item.vertices)
            lines.append(f"{number}  : {{{body}}}; sum = {item.total}")
        return "\n".join(lines) + "\n"


@dataclass
class RankedVertex:
    """A vertex with a ranking weight; heavier vertices sort first."""

    vertex: int
    weight: float

    def __lt__(self, other: RankedVertex) -> bool:
        return self.weight > other.weight