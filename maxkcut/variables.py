"""Solver variables, their indexed container, objective function and solver settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Iterator, TypeVar

from .util import ZERO, ExceptionType, MKCError


class VariableType(Enum):
    """Domain of a decision variable."""

    CONTINUOUS = "continuous"
    INTEGER = "integer"
    SDP = "sdp"


@dataclass(eq=False)
class Variable:
    """A decision variable; identity, not value, tells two variables apart."""

    lower_bound: float = 0.0
    upper_bound: float = 0.0
    solution: float = 0.0
    cost: float = 0.0
    type: VariableType = VariableType.CONTINUOUS
    code: str = "x"

    def copy(self) -> Variable:
        """Return a new, distinct variable with the same attributes."""
        return Variable(
            self.lower_bound,
            self.upper_bound,
            self.solution,
            self.cost,
            self.type,
            self.code,
        )

    def __str__(self) -> str:
        return self.code


V = TypeVar("V")


class Variables(Generic[V]):
    """Indexed collection of variables that remembers which were appended to a solver."""

    def __init__(self) -> None:
        self._variables: list[V | None] = []
        self._index: dict[V, int] = {}
        self._last_appended = -1

    def _validate_index(self, idx: int) -> None:
        if idx < 0 or idx >= len(self._variables):
            raise MKCError("Variables: Index of variable does not exist", ExceptionType.STOP_EXECUTION)

    def add_variable(self, var: V) -> V:
        """Append ``var`` at the end and return it."""
        return self.add_variable_with_index(var, len(self._variables))

    def add_variable_with_index(self, var: V, idx: int) -> V:
        """Place ``var`` at position ``idx``, growing the collection if needed."""
        if idx < 0:
            raise MKCError("Variables: Index of variable does not exist", ExceptionType.STOP_EXECUTION)
        if len(self._variables) <= idx:
            self._variables.extend([None] * (idx + 1 - len(self._variables)))
        self._variables[idx] = var
        self._index.setdefault(var, idx)
        return var

    def __getitem__(self, idx: int) -> V:
        self._validate_index(idx)
        return self._variables[idx]

    def index_of(self, var: V) -> int:
        """Return the position at which ``var`` was first added."""
        try:
            return self._index[var]
        except KeyError:
            raise MKCError(
                f"Variables: Variable does not exist = {var}", ExceptionType.STOP_EXECUTION
            ) from None

    def next_to_append(self) -> V | None:
        """Return the next variable not yet handed to a solver, or None when all were."""
        if self._last_appended == len(self._variables) - 1:
            return None
        self._last_appended += 1
        return self[self._last_appended]

    def non_appended_count(self) -> int:
        return len(self._variables) - self._last_appended - 1

    def reset_append_position(self) -> None:
        self._last_appended = -1

    def __len__(self) -> int:
        return len(self._variables)

    def __iter__(self) -> Iterator[V]:
        return iter(self._variables)


class SenseOptimization(Enum):
    """Direction of optimisation."""

    MAXIMIZATION = "maximization"
    MINIMIZATION = "minimization"


@dataclass
class ObjectiveFunction:
    """Constant term, sense and last solution value of an objective."""

    constant_term: float = 0.0
    sense: SenseOptimization = SenseOptimization.MAXIMIZATION
    solution: float = 0.0

    def __str__(self) -> str:
        return f"\nSolution:{self.solution:.6f}"


@dataclass
class SolverParam:
    """General solver settings."""

    number_threads: int = 1


@dataclass
class TerminationParam:
    """Gap tolerances that end a solver run."""

    gap_tolerance: float
    gap_primal: float
    gap_relative_tolerance: float


@dataclass
class TerminationParamBuilder:
    """Fluent builder of :class:`TerminationParam`, optionally nested in a parent builder."""

    parent: object = None
    gap_tolerance: float = field(default=ZERO)
    gap_primal: float = field(default=ZERO)
    gap_relative_tolerance: float = field(default=ZERO)

    def __init__(self, parent: object = None) -> None:
        self.parent = parent
        self.gap_tolerance = ZERO
        self.gap_primal = ZERO
        self.gap_relative_tolerance = ZERO

    def set_gap_tolerance(self, gap: float) -> TerminationParamBuilder:
        self.gap_tolerance = gap
        return self

    def set_gap_primal(self, gap: float) -> TerminationParamBuilder:
        self.gap_primal = gap
        return self

    def set_gap_relative_tolerance(self, gap: float) -> TerminationParamBuilder:
        self.gap_relative_tolerance = gap
        return self

    def end(self) -> object:
        """Return the enclosing builder."""
        return self.parent

    def build(self) -> TerminationParam:
        return TerminationParam(self.gap_tolerance, self.gap_primal, self.gap_relative_tolerance)