"""
End-to-end: parse, sort recursive lets, encode, normalize, decode.
"""

from functools import partial

import pytest

from caramel.errors import UnboundVariableError, ReductionLimitExceeded
from caramel.parser.main import parse
from caramel.prelude import with_prelude
from caramel.runtime import evaluate, normalize
from caramel.syntax.letrec import sort_recursive_lets
from caramel.syntax.ast import (
    Abstraction, Application, Variable, Natural, ListLit, TupleLit,
    Char, StringLit, Word32,
)

SUM_WITH_LOCAL_DEFS = """
(Y sum 3)
    Y f = ((x -> (f (x x))) (x -> (f (x x))))
    true a b = a
    false a b = b
    is_zero n = (n (x -> false) true)
    add m n f x = (m f (n f x))
    pred n f x = (n (g h -> (h (g f))) (u -> x) (u -> u))
    sum n = (is_zero n 0 (add n (sum (pred n))))
"""


def run(source, prelude=False):
    term = parse(source)
    if prelude:
        term = with_prelude(term)
    return evaluate(sort_recursive_lets(term))


@pytest.mark.parametrize("value", [
    Natural(3),
    ListLit([Natural(1), Natural(2)]),
    TupleLit([Natural(1), Char("x")]),
    Char("x"),
    StringLit("hey"),
    Word32(12345),
])
def test_values_evaluate_to_themselves(value):
    assert evaluate(value) == value


def test_application_reduces():
    assert run("((x -> x) 5)") == Natural(5)


def test_recursive_sum_with_local_definitions():
    assert run(SUM_WITH_LOCAL_DEFS) == Natural(6)


def test_recursive_sum_with_prelude():
    source = "(Y sum 3)\n    sum n = (if (is_zero n) 0 (add n (sum (pred n))))"
    assert run(source, prelude=True) == Natural(6)


@pytest.mark.parametrize("source, expected", [
    ("(add 2 3)", Natural(5)),
    ("(mul 2 3)", Natural(6)),
    ("(sub 5 2)", Natural(3)),
    ("(pow 2 3)", Natural(8)),
    ("(if (eq 2 2) 7 8)", Natural(7)),
    ("(if (leq 3 2) 7 8)", Natural(8)),
    ("(fst (1, 2))", Natural(1)),
    ("(snd (1, 2))", Natural(2)),
    ("(length [1,2,3])", Natural(3)),
    ("(length \"abcd\")", Natural(4)),
    ("(head (tail [4,5,6]))", Natural(5)),
    ("(map succ [1,2])", ListLit([Natural(2), Natural(3)])),
    ("(append [1] [2])", ListLit([Natural(1), Natural(2)])),
    ("(filter is_zero [0,1,0])", ListLit([Natural(0), Natural(0)])),
    ("(foldr add 0 [1,2,3])", Natural(6)),
])
def test_prelude_programs(source, expected):
    assert run(source, prelude=True) == expected


def test_custom_normalizer():
    result = evaluate(parse("((x -> x) 5)"), normalize=lambda term: term)
    assert result == Application([Abstraction(["a"], Variable("a")), Natural(5)])


def test_unbound_variable_propagates():
    with pytest.raises(UnboundVariableError):
        evaluate(parse("(nope 1)"))


def test_step_limit_propagates():
    with pytest.raises(ReductionLimitExceeded):
        evaluate(parse("((x -> (x x)) (x -> (x x)))"), partial(normalize, max_steps=100))


def test_large_products():
    assert run("(mul 40 40)", prelude=True) == Natural(1600)
