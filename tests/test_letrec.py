"""
Recursive let sorting: self-parameter injection and dependency order.
"""

from caramel.parser.main import parse
from caramel.syntax.letrec import sort_recursive_lets, sort_topologically
from caramel.syntax.ast import Abstraction, Application, Variable, Natural, Binding, LetBlock


SUM = "{sum n = (is_zero? n 0 (add n (sum (pred n 1)))); (Y sum 3)}"


def names(term):
    return [b.name for b in term.bindings]


def test_self_recursive_binding_takes_itself_as_parameter():
    sorted_term = sort_recursive_lets(parse(SUM))
    (binding,) = sorted_term.bindings
    assert binding.name == "sum"
    assert binding.params == ["sum", "n"]
    assert binding.body == parse(SUM).bindings[0].body


def test_dependencies_come_first():
    term = LetBlock(
        [Binding("a", [], Application([Variable("b"), Natural(1)])), Binding("b", [], Natural(2))],
        Variable("a"),
    )
    assert names(sort_recursive_lets(term)) == ["b", "a"]


def test_independent_bindings_keep_their_order():
    term = parse("{x = 1; y = 2; z = 3; (x y z)}")
    assert names(sort_recursive_lets(term)) == ["x", "y", "z"]


def test_chain_is_reversed():
    term = parse("{a = b; b = c; c = 1; a}")
    assert names(sort_recursive_lets(term)) == ["c", "b", "a"]


def test_parameters_do_not_count_as_dependencies():
    term = parse("{f b = b; b = 1; (f b)}")
    assert names(sort_recursive_lets(term)) == ["f", "b"]


def test_mutual_recursion_keeps_every_binding():
    term = parse("{even n = (odd n); odd n = (even n); (even 1)}")
    sorted_term = sort_recursive_lets(term)
    assert names(sorted_term) == ["even", "odd"]
    assert [b.params for b in sorted_term.bindings] == [["n"], ["n"]]


def test_cycle_is_broken_at_the_earliest_binding():
    term = parse("{z = 1; a = (b z); b = (a z); a}")
    assert names(sort_recursive_lets(term)) == ["z", "a", "b"]


def test_nested_blocks_are_sorted():
    term = Abstraction(["x"], parse("{p = q; q = x; p}"))
    sorted_term = sort_recursive_lets(term)
    assert names(sorted_term.body) == ["q", "p"]


def test_sort_topologically_on_nodes():
    one = Binding("one", [], Natural(1))
    two = Binding("two", [], Variable("one"))
    nodes = [("two", {"one"}, two), ("one", set(), one)]
    assert sort_topologically(nodes) == [one, two]


def test_terms_without_lets_are_unchanged():
    term = parse("(f [1,2] (x -> x))")
    assert sort_recursive_lets(term) == term
