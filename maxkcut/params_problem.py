"""Problem and cutting-plane settings read from ``key = value`` parameter files."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Iterator

from .util import error, info, split_string, warn


class SolverType(IntEnum):
    """Kind of relaxation solved at each node."""

    SDP = 1
    LP = 2
    LP_SDP_EIG = 4


class FormulationType(IntEnum):
    """Mathematical formulation of the max-k-cut problem."""

    EDGE_ONLY = 1
    NODE_EDGE = 2
    EXTENDED_REPRESENTATIVE = 4


_SOLVER_NAMES = {
    "SDP": SolverType.SDP,
    "LP": SolverType.LP,
    "LP_SDP_EIG": SolverType.LP_SDP_EIG,
}

_SOLVER_LABELS = {
    SolverType.SDP: "SDP",
    SolverType.LP: "LP",
    SolverType.LP_SDP_EIG: "LP_SDP",
}

_FORMULATION_NAMES = {
    "edge_only": FormulationType.EDGE_ONLY,
    "node_edge": FormulationType.NODE_EDGE,
    "extended_representative": FormulationType.EXTENDED_REPRESENTATIVE,
}


def _read_pairs(file_name: str) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` from lines of at least three space-separated tokens."""
    with open(file_name, encoding="utf-8") as handle:
        for line in handle:
            tokens = split_string(line.rstrip("\r\n"), " ")
            if len(tokens) >= 3 and tokens[0] != "#":
                yield tokens[0], tokens[2]


class ProblemParam:
    """Description of the problem to solve: graph file, k, solver and formulation."""

    def __init__(self, path: str) -> None:
        self.file_path_parameters = path
        self.input_graph_file = "instance7.txt"
        self.partition_number = 3
        self.solver_type = SolverType.LP_SDP_EIG
        self.formulation = FormulationType.EDGE_ONLY
        self.has_triangle_inequalities = True
        self.has_clique_inequalities = True
        self.has_wheel_inequalities = True
        self.load(path)

    def set_input_file_path(self, path: str) -> ProblemParam:
        self.input_graph_file = path
        self.validate()
        return self

    def set_number_of_partitions(self, k: int) -> ProblemParam:
        self.partition_number = k
        self.validate()
        return self

    def solver_name(self) -> str:
        """Short label of the solver type."""
        return _SOLVER_LABELS.get(self.solver_type, "NONE")

    def load(self, file_name: str) -> ProblemParam:
        """Read settings from ``file_name`` and validate; keep defaults if it is missing."""
        if not os.path.isfile(file_name):
            info(f"Parameter file of BranchBound not found, using default parameters \n {file_name}")
            return self

        for key, value in _read_pairs(file_name):
            if key == "file_name":
                self.input_graph_file = value
            elif key == "partition_number":
                self.partition_number = int(value)
            elif key == "solver_type":
                if value in _SOLVER_NAMES:
                    self.solver_type = _SOLVER_NAMES[value]
                else:
                    warn(f"Solver type {value} not considered, default = LP_SDP_EIG")
                    self.solver_type = SolverType.LP_SDP_EIG
            elif key == "formulation":
                if value in _FORMULATION_NAMES:
                    self.formulation = _FORMULATION_NAMES[value]
                else:
                    warn(f"The formulation type {value} not yet implemented, set to edge_only")
                    self.formulation = FormulationType.EDGE_ONLY
            elif key == "has_triangle_inequalities":
                self.has_triangle_inequalities = value == "true"
            elif key == "has_clique_inequalities":
                self.has_clique_inequalities = value == "true"
            elif key == "has_wheel_inequalities":
                self.has_wheel_inequalities = value == "true"

        self.validate()
        return self

    def validate(self) -> None:
        """Bring solver and formulation into a supported combination; reject k < 2."""
        if self.solver_type is SolverType.SDP:
            if self.formulation is not FormulationType.EDGE_ONLY:
                warn("For SDP, only edge_only formulation is implemented, so fomulation change do edge_only")
                self.formulation = FormulationType.EDGE_ONLY
        elif self.solver_type is SolverType.LP_SDP_EIG:
            if self.formulation is FormulationType.EXTENDED_REPRESENTATIVE:
                warn("For extended_representative formulation, only LP solver is implemented, so solver = LP")
                self.solver_type = SolverType.LP

        if self.formulation is FormulationType.EDGE_ONLY and not self.has_clique_inequalities:
            warn("Clique must be activated in edge only formulation")
            self.has_clique_inequalities = True

        if self.partition_number < 2:
            error("Number of partitions should be greater than 1")

    def __str__(self) -> str:
        return ""


class CPASettings:
    """Limits and switches of the cutting-plane algorithm."""

    def __init__(self, file_name: str) -> None:
        self.file_path = file_name
        self.max_number_iterations = 100
        self.max_time_seconds = 10.0
        self.max_time_per_iteration_seconds = 10.0
        self.max_number_violated_inequalities_par_iteration = 1000
        self.number_iterations_without_clean_inequalities = 0
        self.verbose = False
        self.is_early_termination = False
        self.load(file_name)

    def load(self, file_name: str) -> None:
        """Overwrite settings with those found in ``file_name``; keep defaults if absent."""
        if not os.path.isfile(file_name):
            print(f"Parameter file not found \n {file_name}")
            return

        for key, value in _read_pairs(file_name):
            if key == "max_number_iterations":
                self.max_number_iterations = int(value)
            elif key == "max_time_seconds":
                self.max_time_seconds = float(value)
            elif key == "max_time_per_iteration_seconds":
                self.max_time_per_iteration_seconds = float(value)
            elif key == "max_number_violated_inequalities_par_iteration":
                self.max_number_violated_inequalities_par_iteration = int(value)
            elif key == "number_iterations_without_clean_inequalities":
                self.number_iterations_without_clean_inequalities = int(value)
            elif key == "verbose":
                self.verbose = value == "true"
            elif key == "is_early_termination_interior_point_method":
                self.is_early_termination = value == "true"

    def __str__(self) -> str:
        return (
            f"max_number_iterations = {self.max_number_iterations}\n"
            f"max_time_seconds = {self.max_time_seconds:.6f}\n"
            f"max_time_per_iteration_seconds = {self.max_time_per_iteration_seconds:.6f}\n"
            "max_number_violated_inequalities_par_iteration = "
            f"{self.max_number_violated_inequalities_par_iteration}\n"
            "number_iterations_without_clean_inequalities = "
            f"{self.number_iterations_without_clean_inequalities}\n"
        )