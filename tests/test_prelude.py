from caramel.parser.main import parse
from caramel.prelude import with_prelude, names
from caramel.syntax.ast import LetBlock


def pulled(source):
    term = with_prelude(parse(source))
    assert isinstance(term, LetBlock)
    return [b.name for b in term.bindings]


def test_only_used_definitions_are_pulled():
    assert pulled("(succ 1)") == ["succ"]


def test_dependencies_are_pulled_in_prelude_order():
    assert pulled("(sub 3 1)") == ["pred", "sub"]
    assert pulled("(is_nil [])") == ["true", "false", "is_nil"]


def test_program_without_prelude_names_is_unchanged():
    term = parse("((x -> x) 1)")
    assert with_prelude(term) == term


def test_program_bindings_shadow_the_prelude():
    term = parse("(add 1 2)\n    add a b = a")
    assert with_prelude(term) == term


def test_prelude_definitions():
    defined = names()
    for name in ["true", "false", "if", "not", "and", "or", "Y", "succ", "add", "mul",
                 "pred", "sub", "is_zero", "fst", "snd", "head", "tail", "map", "foldr", "length"]:
        assert name in defined
