"""
Parser combinators: list-of-successes semantics, biased choice, memo.
"""

from caramel.parser.combinators import (
    Source, char, string, munch, satisfy, pure, fmap, sequence, choice,
    biased, many, many1, run_of, sep_by, memo,
)


def run(parser, text):
    return parser(Source(text), 0)


def test_satisfy_and_char():
    assert run(char("a"), "ab") == [("a", 1)]
    assert run(satisfy(str.isdigit), "x") == []


def test_string_records_partial_match():
    src = Source("abd")
    assert string("abc")(src, 0) == []
    assert src.farthest == 2


def test_munch_is_greedy():
    assert run(munch(str.isspace), "   x") == [("   ", 3)]
    assert run(munch(str.isspace), "x") == [("", 0)]


def test_many_yields_every_count():
    assert run(many(char("a")), "aab") == [([], 0), (["a"], 1), (["a", "a"], 2)]
    assert run(many1(char("a")), "b") == []


def test_choice_keeps_every_alternative():
    assert run(choice(pure(1), fmap(lambda _: 2, char("x"))), "x") == [(1, 0), (2, 1)]


def test_biased_choice_stops_at_first_success():
    assert run(biased(char("y"), pure(1), pure(2)), "x") == [(1, 0)]


def test_sequence_combines_every_path():
    p = sequence(lambda xs, c: ("".join(xs), c), many(char("a")), char("b"))
    assert run(p, "aab") == [(("aa", "b"), 3)]


def test_sep_by():
    p = sep_by(char("a"), char(","))
    assert [v for v, _ in run(p, "a,a")] == [[], ["a"], ["a", "a"]]


def test_memo_runs_each_position_once():
    calls = []

    def counted(src, pos):
        calls.append(pos)
        return [("x", pos)]

    src = Source("")
    p = memo("counted", counted)
    p(src, 0)
    p(src, 0)
    assert calls == [0]


def test_location_is_one_based():
    src = Source("ab\ncd")
    assert src.location(0) == (1, 1)
    assert src.location(4) == (2, 2)


def test_run_of_yields_every_prefix():
    assert run(run_of(str.isdigit), "123x") == [("1", 1), ("12", 2), ("123", 3)]
    assert run(run_of(str.isdigit), "x") == []


def test_run_of_records_where_the_run_stopped():
    src = Source("ab!")
    run_of(str.isalpha)(src, 0)
    assert src.farthest == 2


def test_many_over_long_input():
    results = run(many(char("a")), "a" * 3000)
    assert len(results) == 3001
    assert results[-1] == (["a"] * 3000, 3000)
