"""Cutting-plane algorithm: settings, model interface and the solve/separate loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .util import info
from .variables import TerminationParam, TerminationParamBuilder


@dataclass
class CPAParam:
    """Settings of a cutting-plane run."""

    number_max_iterations: int
    termination_param: TerminationParam
    is_early_termination: bool
    number_iterations_between_optimality: int
    number_max_violated_constraints: int


class CPAParamBuilder:
    """Fluent builder of :class:`CPAParam`, optionally nested in a parent builder."""

    def __init__(self, parent: Any = None) -> None:
        self.parent = parent
        self.number_max_iterations = 1
        self.termination_builder = TerminationParamBuilder(self)
        self.is_early_termination = False
        self.number_iterations_between_optimality = 3
        self.number_max_violated_constraints = 100

    def set_number_max_iterations(self, number: int) -> CPAParamBuilder:
        if number <= 0:
            raise ValueError("the number of iterations must be positive")
        self.number_max_iterations = number
        return self

    def set_number_max_violated_constraints(self, number: int) -> CPAParamBuilder:
        if number <= 0:
            raise ValueError("the number of violated constraints must be positive")
        self.number_max_violated_constraints = number
        return self

    def set_early_termination(self, nb: int = 3) -> TerminationParamBuilder:
        """Enable early termination; return the builder of its gap tolerances."""
        self.number_iterations_between_optimality = nb
        self.is_early_termination = True
        return self.termination_builder

    def end(self) -> Any:
        """Return the enclosing builder."""
        return self.parent

    def build(self) -> CPAParam:
        return CPAParam(
            number_max_iterations=self.number_max_iterations,
            termination_param=self.termination_builder.build(),
            is_early_termination=self.is_early_termination,
            number_iterations_between_optimality=self.number_iterations_between_optimality,
            number_max_violated_constraints=self.number_max_violated_constraints,
        )


class ModelAbstract(ABC):
    """A model that can be solved and can add the constraints its solution violates."""

    def __init__(self, solver: Any) -> None:
        self.solver = solver

    @abstractmethod
    def solve(self) -> ModelAbstract:
        """Solve the current relaxation."""

    @abstractmethod
    def find_violated_constraints(self, nb_max_ineq: int) -> int:
        """Add at most ``nb_max_ineq`` violated constraints; return how many were violated."""

    @property
    def optimal_solution_value(self) -> float:
        return self.solver.optimal_solution_value

    def update_solver_termination_param(self, param: TerminationParam, is_early: bool) -> ModelAbstract:
        self.solver.update_termination_param(param, is_early)
        return self


class CuttingPlaneAlgorithm(ABC):
    """Alternate solving the model and adding violated constraints until a stop criterion holds."""

    def __init__(self, model: ModelAbstract, param: CPAParam) -> None:
        self.model = model
        self.param = param

    @abstractmethod
    def solve_model(self) -> None:
        """Solve the model once."""

    @abstractmethod
    def find_violate_constraints(self) -> None:
        """Separate violated constraints after a solve."""

    def execute(self) -> int:
        """Run the loop; return the number of iterations performed."""
        info("*** Start CPA ***")
        iteration = 0
        while not self.is_stopping_criteria(iteration):
            self.solve_model()
            self.find_violate_constraints()
            iteration += 1
        info("*** END CPA ***")
        return iteration

    def is_stopping_criteria(self, iteration: int) -> bool:
        if iteration == 0:
            return False
        return iteration >= self.param.number_max_iterations


class MKCCuttingPlane(CuttingPlaneAlgorithm):
    """Cutting-plane loop that stops once no violated constraint is found."""

    def __init__(self, model: ModelAbstract, param: CPAParam) -> None:
        super().__init__(model, param)
        self.counter_non_optim_iterations = param.number_iterations_between_optimality
        self.counter_optimal_iterations = 0
        self.number_violated_ineqs = 0
        self.previous_solution_value = 0.0
        self.is_early = False

    def solve_model(self) -> None:
        self.is_early = self.is_early_termination()
        self.model.update_solver_termination_param(self.param.termination_param, self.is_early)
        self.model.solve()

    def find_violate_constraints(self) -> None:
        self.number_violated_ineqs = self.model.find_violated_constraints(
            self.param.number_max_violated_constraints
        )

    def is_stopping_criteria(self, iteration: int) -> bool:
        if super().is_stopping_criteria(iteration):
            return True

        if self.is_early:
            if self.number_violated_ineqs == 0:
                self.counter_non_optim_iterations = self.param.number_iterations_between_optimality
        else:
            current = self.model.optimal_solution_value
            self.counter_optimal_iterations += 1
            if iteration > 0 and self.number_violated_ineqs == 0:
                return True
            self.previous_solution_value = current

        return False

    def is_early_termination(self) -> bool:
        """Tell whether the next solve may stop early, advancing the internal counter."""
        if self.param.is_early_termination:
            if self.counter_non_optim_iterations < self.param.number_iterations_between_optimality:
                self.counter_non_optim_iterations += 1
                return True
            self.counter_non_optim_iterations = 0
        return False