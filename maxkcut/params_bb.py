"""Branch-and-bound and heuristic settings read from ``key = value`` parameter files."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Iterator

from .util import info, split_string, warn


class SelectionStrategy(IntEnum):
    """Order in which open branches are explored."""

    BEST_FIRST = 1
    WORSE_FIRST = 2
    BREATH_FIRST = 3
    DEPTH_FIRST = 4


class PartitionStrategy(IntEnum):
    """How many children each branch produces."""

    DICHOTOMIC = 1
    K_CHOTOMIC = 2


class BranchRule(IntEnum):
    """Rule for picking the variable to branch on."""

    R1_MOST_DECIDED = 1
    R2_ARTICLE_MG = 2
    R3_LEAST_DECIDED = 3
    R5_EDGE_WEIGHT = 5
    R6_STRONG_BRANCHING = 6
    R7_PSEUDO_COST = 7


class SolutionStrategy(IntEnum):
    """When node relaxations are solved."""

    EAGER_BB = 1
    LAZY_FOR_BB = 2


class VerboseType(IntEnum):
    """Where branch-and-bound iterations are logged."""

    LOG_ITERATIONS_IN_FILE = 1
    LOG_ITERATIONS_IN_TERMINAL = 2
    LOG_ITERATIONS_TERMINAL_AND_FILE = 3
    SKIP = 4


class HeuristicType(IntEnum):
    """Primal heuristic used to find feasible cuts."""

    VNS = 1
    GRASP = 2
    MOH = 3
    ICH = 4


_SELECTION_NAMES = {
    "best_first": SelectionStrategy.BEST_FIRST,
    "worse_first": SelectionStrategy.WORSE_FIRST,
    "breath_first": SelectionStrategy.BREATH_FIRST,
    "depth_first": SelectionStrategy.DEPTH_FIRST,
}

_PARTITION_NAMES = {
    "DICHOTOMIC": PartitionStrategy.DICHOTOMIC,
    "K_CHOTOMIC": PartitionStrategy.K_CHOTOMIC,
}

_RULE_NAMES = {
    "R1_MostDecided": BranchRule.R1_MOST_DECIDED,
    "R2_ArticleMG": BranchRule.R2_ARTICLE_MG,
    "R3_LeastDecided": BranchRule.R3_LEAST_DECIDED,
    "R5_EdgeWeight": BranchRule.R5_EDGE_WEIGHT,
    "R6_StrongBrahching": BranchRule.R6_STRONG_BRANCHING,
    "R7_PseudoCost": BranchRule.R7_PSEUDO_COST,
}

_SOLUTION_NAMES = {
    "EAGER_BB": SolutionStrategy.EAGER_BB,
    "LAZY_BB": SolutionStrategy.LAZY_FOR_BB,
}

_VERBOSE_NAMES = {
    "log_iterations_in_file": VerboseType.LOG_ITERATIONS_IN_FILE,
    "log_iterations_in_terminal": VerboseType.LOG_ITERATIONS_IN_TERMINAL,
    "log_iterations_terminal_and_file": VerboseType.LOG_ITERATIONS_TERMINAL_AND_FILE,
    "skip": VerboseType.SKIP,
    "no_log_of_iterations": VerboseType.SKIP,
}

_HEURISTIC_NAMES = {
    "variable_neighborhood_search": HeuristicType.VNS,
    "grasp_metaheuristic": HeuristicType.GRASP,
    "multiple_search_Heuristic": HeuristicType.MOH,
    "iterative_clustering_heuristic": HeuristicType.ICH,
}


def _settings(file_name: str) -> Iterator[tuple[str, str]] | None:
    """Return the ``(key, value)`` pairs of a parameter file, or None if it is missing."""
    if not os.path.isfile(file_name):
        return None

    def pairs() -> Iterator[tuple[str, str]]:
        with open(file_name, encoding="utf-8") as handle:
            for line in handle:
                tokens = split_string(line.rstrip("\r\n"), " ")
                if len(tokens) >= 3 and tokens[0] != "#":
                    yield tokens[0], tokens[2]

    return pairs()


def _choose(table: dict, value: str, default, message: str):
    if value in table:
        return table[value]
    warn(message)
    return default


class BranchBoundParam:
    """Settings of the branch-and-bound search."""

    def __init__(self, file_name: str) -> None:
        self.file_path = file_name
        self.selection_strategy = SelectionStrategy.BEST_FIRST
        self.partition_strategy = PartitionStrategy.DICHOTOMIC
        self.branch_rule_strategy = BranchRule.R5_EDGE_WEIGHT
        self.solution_strategy = SolutionStrategy.LAZY_FOR_BB
        self.number_iterations_to_execute_cutting_plane = 1
        self.max_time_seconds = 10.0
        self.number_iterations_to_compute_heuristic = 20
        self.verbose = VerboseType.SKIP
        self.output_file_name = ""
        self.initial_feasible_solution = 0.0
        self.load(file_name)

    def load(self, file_name: str) -> None:
        """Overwrite settings with those found in ``file_name``; keep defaults if absent."""
        pairs = _settings(file_name)
        if pairs is None:
            info(f"Parameter file of BranchBound not found, using default parameters \n {file_name}")
            return

        for key, value in pairs:
            if key == "selection_strategy":
                self.selection_strategy = _choose(
                    _SELECTION_NAMES, value, SelectionStrategy.BEST_FIRST,
                    f"Selection type of branch and bound ({value}) not considered, "
                    "set as default = best_first",
                )
            elif key == "partition_strategy":
                self.partition_strategy = _choose(
                    _PARTITION_NAMES, value, PartitionStrategy.DICHOTOMIC,
                    f"Partition type of branch and bound ({value}) not considered, "
                    "set to default = DICHOTOMIC",
                )
            elif key == "branch_rule_strategy":
                self.branch_rule_strategy = _choose(
                    _RULE_NAMES, value, BranchRule.R1_MOST_DECIDED,
                    f"Rule type of branch and bound ({value}) not considered, "
                    "set as default = R1_MostDecided",
                )
            elif key == "number_iterations_to_execute_cutting_plane":
                self.number_iterations_to_execute_cutting_plane = int(value)
            elif key == "max_time_seconds":
                self.max_time_seconds = float(value)
            elif key == "number_iterations_to_compute_heuristic":
                self.number_iterations_to_compute_heuristic = int(value)
            elif key == "verbose":
                self.verbose = _choose(
                    _VERBOSE_NAMES, value, VerboseType.SKIP,
                    f"Verbose type of branch and bound ({value}) not considered, set default = skip",
                )
            elif key == "output_file_name":
                self.output_file_name = value
            elif key == "initial_feasible_solution":
                self.initial_feasible_solution = float(value)

    @staticmethod
    def parse_solution_strategy(value: str) -> SolutionStrategy:
        """Map a solution-strategy name to its value, defaulting to LAZY_FOR_BB."""
        return _choose(
            _SOLUTION_NAMES, value, SolutionStrategy.LAZY_FOR_BB,
            f"Solution selection type of branch and bound ({value}) not considered, "
            "set default = LAZY_FOR_BB",
        )

    def is_verbose_terminal(self) -> bool:
        return self.verbose in (
            VerboseType.LOG_ITERATIONS_IN_TERMINAL,
            VerboseType.LOG_ITERATIONS_TERMINAL_AND_FILE,
        )

    def is_save_iterations_in_file(self) -> bool:
        return self.verbose in (
            VerboseType.LOG_ITERATIONS_IN_FILE,
            VerboseType.LOG_ITERATIONS_TERMINAL_AND_FILE,
        )

    def __str__(self) -> str:
        return (
            f"file_path = {self.file_path}\n"
            f"partition_strategy = {int(self.partition_strategy)}\n"
            f"branch_rule_strategy = {int(self.branch_rule_strategy)}\n"
            "number_iterations_to_execute_cutting_plane = "
            f"{self.number_iterations_to_execute_cutting_plane}\n"
            f"selection_strategy = {int(self.selection_strategy)}\n"
            f"solution_strategy = {int(self.solution_strategy)}\n"
            f"verbose{int(self.verbose)}\n"
        )


class HeuristicParam:
    """Settings of the primal heuristic."""

    def __init__(self, file_name: str) -> None:
        self.file_parameter = file_name
        self.heuristic_type = HeuristicType.VNS
        self.max_time_seconds = 2.0
        self.verbose = False
        self.load(file_name)

    def load(self, file_name: str) -> None:
        """Overwrite settings with those found in ``file_name``; keep defaults if absent."""
        pairs = _settings(file_name)
        if pairs is None:
            info(f"Parameter file of BranchBound not found, using default parameters \n {file_name}")
            return

        for key, value in pairs:
            if key == "heuristic_type":
                self.heuristic_type = _choose(
                    _HEURISTIC_NAMES, value, HeuristicType.VNS,
                    f"The heuristic_type type {value} not considered, default = VNS",
                )
            elif key == "max_time_seconds":
                self.max_time_seconds = float(value)

    def __str__(self) -> str:
        return ""