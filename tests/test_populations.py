import math

import pytest

from maxkcut.populations import (
    CliqueConstraint,
    CliquePopulation,
    ConstraintSelection,
    LPtoSDPPopulation,
    RankedVertex,
    SelectionPopulation,
)
from maxkcut.util import ExceptionType, MKCError


def _sel(pos, gap):
    return ConstraintSelection(0, pos, gap, gap, 1.0)


def test_selection_orders_by_decreasing_gap():
    pop = SelectionPopulation(10)
    for pos, gap in enumerate([0.3, 0.9, 0.1, 0.5]):
        pop.add(_sel(pos, gap))
    gaps = [e.gap for e in pop]
    assert gaps == sorted(gaps, reverse=True)
    assert len(pop) == 4


def test_selection_cap_keeps_largest():
    pop = SelectionPopulation(2)
    for pos, gap in enumerate([0.3, 0.9, 0.1, 0.5]):
        pop.add(_sel(pos, gap))
    assert len(pop) == 2
    assert [e.gap for e in pop] == [0.9, 0.5]


def test_selection_ties_newest_first():
    pop = SelectionPopulation(5)
    pop.add(_sel(1, 0.4))
    pop.add(_sel(2, 0.4))
    assert [e.origin_pos for e in pop] == [2, 1]


def test_selection_negative_gap_raises():
    with pytest.raises(MKCError) as info:
        ConstraintSelection(0, 0, -0.1, 1.0, 1.0)
    assert info.value.kind is ExceptionType.STOP_EXECUTION


def test_add_inequality_uses_absolute_rhs():
    pop = SelectionPopulation()
    element = pop.add_inequality(3, 7, 2.0, -4.0)
    assert element.gap == 0.5
    assert element.rhs == -4.0
    assert len(pop) == 1
    assert pop[0] is element


def test_add_inequality_zero_rhs_gives_infinite_gap():
    pop = SelectionPopulation()
    element = pop.add_inequality(0, 0, 1.0, 0.0)
    assert element.gap == math.inf
    assert pop[0] is element


def test_selection_top_and_index_errors():
    pop = SelectionPopulation(10)
    for pos, gap in enumerate([0.1, 0.2, 0.3, 0.4]):
        pop.add(_sel(pos, gap))
    assert [e.gap for e in pop.top(1)] == [0.4, 0.3]
    with pytest.raises(MKCError):
        pop[10]


def test_selection_clear_resets_cap():
    pop = SelectionPopulation(3)
    pop.add(_sel(0, 0.2))
    pop.clear()
    assert len(pop) == 0
    assert pop.max_size == 0


def test_lp_sdp_ascending_and_accessors():
    pop = LPtoSDPPopulation()
    assert pop.add([1.0, 0.0], 0.5, False) is True
    pop.add([0.0, 1.0], -2.0, True)
    pop.add([1.0, 1.0], -0.5, True)
    assert [pop.eigenvalue(i) for i in range(len(pop))] == [-2.0, -0.5, 0.5]
    assert pop.vector(0) == [0.0, 1.0]
    assert pop.is_negative(1) is True
    assert pop.is_negative(5) is False


def test_lp_sdp_negative_eigenpairs():
    pop = LPtoSDPPopulation()
    pop.add([1.0], -3.0, True)
    pop.add([2.0], -1.0, True)
    pop.add([3.0], 0.0, False)
    assert pop.negative_eigenpairs(1.0) == [(-3.0, [1.0])]
    assert pop.negative_eigenpairs(0.0) == [(-3.0, [1.0]), (-1.0, [2.0])]


def test_lp_sdp_out_of_range_raises_and_clear():
    pop = LPtoSDPPopulation()
    pop.add([1.0], 1.0, False)
    with pytest.raises(MKCError):
        pop.eigenvalue(3)
    with pytest.raises(MKCError):
        pop.vector(-1)
    pop.clear()
    assert len(pop) == 0


def test_lp_sdp_str_mentions_eigenvalue():
    pop = LPtoSDPPopulation()
    pop.add([1.5], -2.0, True)
    assert "eigVal = -2.0" in str(pop)


def test_clique_population_ascending():
    pop = CliquePopulation()
    pop.add([1, 2, 3], 3, 2.5, 1.0)
    pop.add([4, 5, 6, 7], 4, 0.5, 2.0)
    assert [c.total for c in pop] == [0.5, 2.5]
    assert pop.vertices(0) == [4, 5, 6, 7]
    assert pop[0].q == 4
    assert pop[1].rhs == 1.0


def test_clique_out_of_range_and_clear():
    pop = CliquePopulation()
    with pytest.raises(MKCError):
        pop[0]
    pop.add([1, 2], 2, 1.0, 0.0)
    pop.clear()
    assert len(pop) == 0


def test_clique_equality():
    assert CliqueConstraint([1, 2, 3], 1.0) == CliqueConstraint([1, 2, 3], 1.0, 5.0)
    assert not CliqueConstraint([1, 2, 3], 1.0) == CliqueConstraint([1, 2, 4], 1.0)
    assert not CliqueConstraint([1, 2], 1.0) == CliqueConstraint([1, 2], 2.0)


def test_ranked_vertices_heaviest_first():
    ranked = sorted([RankedVertex(1, 0.5), RankedVertex(2, 3.0), RankedVertex(3, 1.0)])
    assert [r.vertex for r in ranked] == [2, 3, 1]