"""Graph, parameter, variable, constraint and cutting-plane building blocks for max-k-cut."""

__version__ = "0.1.0"

__all__ = [
    "util",
    "edges",
    "params_bb",
    "params_problem",
    "variables",
    "constraints",
    "cutting_plane",
    "populations",
]