import pytest

from maxkcut.constraints import (
    Constraint,
    ConstraintBoundKey,
    ConstraintCoefficient,
    ConstraintType,
    LinearConstraint,
)
from maxkcut.util import MKCError
from maxkcut.variables import Variable


def test_linear_constraint_defaults():
    c = LinearConstraint()
    assert c.lower_bound == 0.0
    assert c.upper_bound == 0.0
    assert c.bound_key is ConstraintBoundKey.EQUAL
    assert c.type is ConstraintType.LINEAR
    assert len(c) == 0


def test_add_coefficient_returns_term():
    c = LinearConstraint(-1.0, 1.0, ConstraintBoundKey.INFERIOR_EQUAL)
    var = Variable()
    term = c.add_coefficient(var, -1.0)
    assert term == ConstraintCoefficient(var, -1.0)
    assert c.coefficient_at(0) is term
    assert len(c) == 1


def test_add_coefficients_chains_in_order():
    vs = [Variable(), Variable(), Variable()]
    c = LinearConstraint().add_coefficients(vs, [-1.0, 1.0, 1.0])
    assert len(c) == 3
    assert [t.variable for t in c.coefficients] == vs
    assert [t.value for t in c.coefficients] == [-1.0, 1.0, 1.0]


def test_add_coefficients_length_mismatch():
    with pytest.raises(ValueError):
        LinearConstraint().add_coefficients([Variable()], [1.0, 2.0])


def test_coefficient_at_out_of_range():
    c = LinearConstraint()
    c.add_coefficient(Variable(), 1.0)
    with pytest.raises(MKCError):
        c.coefficient_at(1)
    with pytest.raises(MKCError):
        c.coefficient_at(-1)


def test_copy_is_equal_and_independent():
    vs = [Variable(), Variable()]
    c = LinearConstraint(-1.0, 1.0, ConstraintBoundKey.INFERIOR_EQUAL).add_coefficients(vs, [1.0, -1.0])
    clone = c.copy()
    assert clone is not c
    assert clone == c
    assert clone.lower_bound == c.lower_bound
    assert clone.upper_bound == c.upper_bound
    assert clone.bound_key is c.bound_key
    clone.add_coefficient(Variable(), 1.0)
    assert len(c) == 2
    assert clone != c


def test_equality_depends_on_variable_identity_and_value():
    a, b = Variable(), Variable()
    c1 = LinearConstraint().add_coefficients([a], [1.0])
    c2 = LinearConstraint(5.0, 6.0).add_coefficients([a], [1.0])
    c3 = LinearConstraint().add_coefficients([b], [1.0])
    c4 = LinearConstraint().add_coefficients([a], [2.0])
    assert c1 == c2
    assert not c1 == c3
    assert not c1 == c4


def test_constraint_len_and_equality():
    a, b = Variable(), Variable()
    c1 = Constraint([a, b], [1.0, -1.0], 0.0, 1.0, ConstraintBoundKey.INFERIOR_EQUAL)
    c2 = Constraint([a, b], [1.0, -1.0], 0.0, 1.0, ConstraintBoundKey.INFERIOR_EQUAL)
    c3 = Constraint([a, b], [1.0, -1.0], 0.0, 2.0, ConstraintBoundKey.INFERIOR_EQUAL)
    assert len(c1) == 2
    assert c1 == c2
    assert not c1 == c3


def test_constraint_str_format():
    c = Constraint([Variable()], [2.0], 0.0, 1.0, ConstraintBoundKey.INFERIOR_EQUAL)
    assert str(c) == "Constraint: 0.000000 <= 2.000000*x_( idx) + <=1.000000"


def test_constraint_length_mismatch():
    with pytest.raises(ValueError):
        Constraint([Variable()], [], 0.0, 1.0, ConstraintBoundKey.EQUAL)