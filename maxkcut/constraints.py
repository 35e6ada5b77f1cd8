"""Linear constraints over solver variables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from .util import ExceptionType, MKCError
from .variables import Variable


class ConstraintBoundKey(Enum):
    """Which side of a constraint is bounded."""

    SUPERIOR_EQUAL = "superior_equal"
    EQUAL = "equal"
    INFERIOR_EQUAL = "inferior_equal"


class ConstraintType(Enum):
    """Family of a constraint."""

    LINEAR = "linear"
    SYMMETRIC = "symmetric"


@dataclass(frozen=True)
class ConstraintCoefficient:
    """A variable paired with its coefficient in a constraint."""

    variable: Variable
    value: float


class LinearConstraint:
    """A linear constraint ``lower <= sum(a_i * x_i) <= upper``."""

    type = ConstraintType.LINEAR

    def __init__(
        self,
        lower_bound: float = 0.0,
        upper_bound: float = 0.0,
        bound_key: ConstraintBoundKey = ConstraintBoundKey.EQUAL,
    ) -> None:
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.bound_key = bound_key
        self._coefficients: list[ConstraintCoefficient] = []

    @property
    def coefficients(self) -> tuple[ConstraintCoefficient, ...]:
        return tuple(self._coefficients)

    def add_coefficient(self, variable: Variable, value: float) -> ConstraintCoefficient:
        """Add one term and return it."""
        coefficient = ConstraintCoefficient(variable, value)
        self._coefficients.append(coefficient)
        return coefficient

    def add_coefficients(self, variables: Iterable[Variable], values: Iterable[float]) -> LinearConstraint:
        """Add terms pairwise from ``variables`` and ``values``."""
        variables, values = list(variables), list(values)
        if len(variables) != len(values):
            raise ValueError("variables and values must have the same length")
        for variable, value in zip(variables, values):
            self.add_coefficient(variable, value)
        return self

    def copy(self) -> LinearConstraint:
        """Return a new constraint with the same bounds and terms."""
        other = LinearConstraint(self.lower_bound, self.upper_bound, self.bound_key)
        for coefficient in self._coefficients:
            other.add_coefficient(coefficient.variable, coefficient.value)
        return other

    def coefficient_at(self, idx: int) -> ConstraintCoefficient:
        if idx < 0 or idx >= len(self._coefficients):
            raise MKCError(
                "Invalid index in LinearConstraint.coefficient_at", ExceptionType.STOP_EXECUTION
            )
        return self._coefficients[idx]

    def __len__(self) -> int:
        return len(self._coefficients)

    def __eq__(self, other: object) -> bool:
        """Constraints are equal when their terms match in order."""
        if not isinstance(other, LinearConstraint):
            return NotImplemented
        return self._coefficients == other._coefficients

    __hash__ = None


class Constraint:
    """A constraint held as parallel lists of variables and coefficients."""

    def __init__(
        self,
        variables: Sequence[Variable] = (),
        coefficients: Sequence[float] = (),
        lower_bound: float = 0.0,
        upper_bound: float = 0.0,
        bound_key: ConstraintBoundKey = ConstraintBoundKey.EQUAL,
    ) -> None:
        if len(variables) != len(coefficients):
            raise ValueError("variables and coefficients must have the same length")
        self.variables = list(variables)
        self.coefficients = list(coefficients)
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.bound_key = bound_key

    def __len__(self) -> int:
        return len(self.variables)

    def __str__(self) -> str:
        terms = "".join(f"{coef:.6f}*x_( idx) + " for coef in self.coefficients)
        return f"Constraint: {self.lower_bound:.6f} <= {terms}<={self.upper_bound:.6f}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return (
            self.lower_bound == other.lower_bound
            and self.upper_bound == other.upper_bound
            and len(self.variables) == len(other.variables)
            and all(a is b for a, b in zip(self.variables, other.variables))
            and self.coefficients == other.coefficients
        )

    __hash__ = None