import pytest

from caramel.core import Lam, App, Var, lams, show_pure, size
from caramel.errors import ReductionLimitExceeded
from caramel.parser.main import parse
from caramel.runtime.reducer import normalize, beta, shift
from caramel.translate.encoder import encode

I = Lam(Var(0))
OMEGA = App(Lam(App(Var(0), Var(0))), Lam(App(Var(0), Var(0))))


def church(n):
    return encode(parse(str(n)))


def test_identity_application():
    assert normalize(App(I, I)) == I


def test_reduces_under_binders():
    assert normalize(Lam(App(I, Var(0)))) == Lam(Var(0))


def test_shift_only_moves_escaping_variables():
    assert shift(Lam(App(Var(0), Var(1))), 2) == Lam(App(Var(0), Var(3)))
    assert shift(Var(0), 1, cutoff=1) == Var(0)


def test_beta_substitutes_and_lowers():
    assert beta(Var(0), I) == I
    assert beta(Var(1), I) == Var(0)


def test_substituted_value_is_shifted_under_binders():
    # (λ. λ. 1) 5  →  λ. 6
    assert normalize(App(Lam(Lam(Var(1))), Var(5))) == Lam(Var(6))


def test_church_addition():
    add = encode(parse("(m n f x -> (m f (n f x)))"))
    assert normalize(App(App(add, church(2)), church(3))) == church(5)


def test_normal_order_skips_divergent_arguments():
    const = Lam(Lam(Var(1)))
    assert normalize(App(App(const, I), OMEGA)) == I


def test_step_limit():
    with pytest.raises(ReductionLimitExceeded) as info:
        normalize(OMEGA, max_steps=50)
    assert info.value.steps == 50


def test_normal_forms_need_no_steps():
    assert normalize(church(4), max_steps=0) == church(4)


def test_show_pure_and_size():
    assert show_pure(App(I, Var(3))) == "((λ 0) 3)"
    assert size(App(I, Var(3))) == 4


def test_deep_numerals_normalize():
    succ = encode(parse("(n f x -> (f (n f x)))"))
    result = normalize(App(succ, church(3000)))
    assert size(result) == size(church(3001))
    assert show_pure(result) == show_pure(church(3001))


def test_shift_under_many_binders():
    shifted = shift(lams(3000, Var(3000)), 1)
    assert show_pure(shifted) == show_pure(lams(3000, Var(3001)))
