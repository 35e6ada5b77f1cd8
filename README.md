# maxkcut

This package holds building blocks for solving the max-k-cut problem with
cutting-plane methods over LP and SDP relaxations. It contains a graph, the
settings read from parameter files, solver variables and constraints, a
cutting-plane loop, and ordered pools of candidate inequalities. It uses only
the standard library.

## Modules

- `maxkcut.util`
  - `is_zero`, `format_vector` and `format_matrix`.
  - Levelled logging: `LogLevel`, `set_log_level`, `log`, `warn`, `info`,
    `debug` and `fatal`. The default level is `LogLevel.ERROR`, so warnings
    and info messages are not printed unless you raise the level. `error`
    logs its message and then raises `MKCError`.
  - `split_string` splits text and drops empty tokens.
  - `current_date_time`, `dir_exists` and `make_dir`.
  - Errors are raised as `MKCError`, which carries an `ExceptionType`.
- `maxkcut.edges`
  - `Edge`, `Edges` and `MKCInstance`.
  - `Edges` is a weighted undirected graph whose vertices are numbered from 1.
    It finds the edge between two vertices through a triangular index
    (`position`, `edge_between`, `has_edge`).
  - `make_chordal` adds zero-weight edges with a min-degree heuristic and
    records the cliques it finds in `maximal_cliques`. `make_complete` joins
    every pair of vertices.
  - An invalid vertex raises `MKCError`.
- `maxkcut.params_bb`
  - `BranchBoundParam` holds the selection strategy, partition strategy,
    branching rule, time limit, verbosity and related settings.
  - `HeuristicParam` holds the heuristic type and its time limit.
  - Each has a matching enum: `SelectionStrategy`, `PartitionStrategy`,
    `BranchRule`, `SolutionStrategy`, `VerboseType` and `HeuristicType`.
- `maxkcut.params_problem`
  - `ProblemParam` holds the input graph file, the number of partitions, the
    `SolverType`, the `FormulationType` and the inequality families in use.
  - `validate` changes unsupported solver and formulation combinations to
    supported ones. It raises `MKCError` when the number of partitions is
    below 2.
  - `CPASettings` holds the limits of the cutting-plane algorithm.
- `maxkcut.variables`
  - `Variable` and the `Variables` container. The container indexes its
    variables and tracks which ones have been appended (`next_to_append`,
    `non_appended_count`).
  - `ObjectiveFunction`, `SolverParam`, `TerminationParam` and
    `TerminationParamBuilder`.
- `maxkcut.constraints`
  - `LinearConstraint` is built from `ConstraintCoefficient` terms.
  - `Constraint` holds parallel lists of variables and coefficients.
  - `ConstraintBoundKey` and `ConstraintType`.
- `maxkcut.cutting_plane`
  - `CPAParam` and `CPAParamBuilder`.
  - The abstract `ModelAbstract` and `CuttingPlaneAlgorithm`.
  - `MKCCuttingPlane` alternates `solve` and `find_violated_constraints` on
    a model. It stops at the iteration limit, or once a full solve finds no
    violated constraint, and it supports early termination.
- `maxkcut.populations`
  - `SelectionPopulation` keeps inequalities in order of decreasing gap,
    with an optional size cap.
  - `LPtoSDPPopulation` keeps eigenpairs in order of increasing eigenvalue.
  - `CliquePopulation` keeps clique inequalities in order of increasing sum.
  - `RankedVertex` sorts heavier vertices first.

## Example

```python
from maxkcut.edges import Edges, MKCInstance

edges = Edges(4)
edges.add_edge(1, 2, 3.0)
edges.add_edge(2, 3, 1.5)
edges.add_edge(3, 4, 2.0)
edges.add_edge(4, 1, 1.0)

print(edges.total_weight())   # 7.5
edges.make_chordal()          # adds zero-weight edges to triangulate the cycle
print(edges.maximal_cliques)

instance = MKCInstance(edges, 3)
```

## Parameter files

A parameter file holds one setting per line, in the form `name = value`. The
words on a line are separated by single spaces. The first word is the name and
the third word is the value.

- A line whose first word is `#` is ignored.
- A line with fewer than three words is ignored.
- A missing file leaves every setting at its default.

For example:

```
# problem settings
partition_number = 3
solver_type = LP
formulation = edge_only
```

```python
from maxkcut.params_problem import ProblemParam

param = ProblemParam("problem.txt")
print(param.solver_name())   # "LP"
```

## What the package does not do

- The package contains no LP or SDP solver and no concrete max-k-cut model.
  `ModelAbstract` must be subclassed and given a solver object that provides
  `optimal_solution_value` and `update_termination_param`.
- There is no separation routine that turns a relaxed solution into violated
  inequalities.
- There is no reader for graph files.
- There is no branch-and-bound driver.
- There is no command-line program.

## Tests

```
pip install .[test]
pytest
```