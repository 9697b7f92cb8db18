from functools import lru_cache
from ..syntax.ast import (
    Abstraction, Application, Variable, Natural, ListLit, TupleLit,
    Char, StringLit, Word32, Adt, Binding, LetBlock,
)
from ..z3_ops import bitvec
from .combinators import (
    Parser, satisfy, char, string, munch, fmap, sequence, right, between,
    choice, biased, many, many1, run_of, sep_by, sep_by1, lazy, memo,
)

# ======================================
# Grammar Configuration
# ======================================

INDENT_WIDTH = 4
WORD_PUNCTUATION = "_.@:?$!^&|*-+<>~=/"
DIGITS = "0123456789"

# ======================================
# Lexical Pieces
# ======================================

space = munch(str.isspace)

def spaced(p: Parser) -> Parser:
    return sequence(lambda _a, v, _b: v, space, p, space)

word = run_of(lambda c: c.isalnum() or c in WORD_PUNCTUATION)
number = run_of(lambda c: c in DIGITS)

# ======================================
# Sugars
# ======================================

string_lit = sequence(lambda _o, s, _c: StringLit(s), char('"'), munch(lambda c: c != '"'), char('"'))

char_lit = sequence(lambda _o, c, _c: Char(c), char("'"), satisfy(lambda c: True), char("'"))

word_lit = sequence(lambda _h, digits: Word32(bitvec.truncate(int(digits), bitvec.WORD_WIDTH)), char("#"), number)

natural = fmap(lambda digits: Natural(int(digits)), number)

variable = fmap(Variable, choice(word, fmap("".join, many1(char("#")))))

def term_ref(d: int) -> Parser:
    return lazy(lambda: term(d))

def lam(d: int) -> Parser:
    params = sep_by(word, char(" "))
    return sequence(
        lambda _o, ps, _arrow, body, _c: Abstraction(ps, body),
        char("("), params, spaced(string("->")), term_ref(d), char(")"),
    )

@lru_cache(maxsize=None)
def definition(d: int) -> Parser:
    names = sep_by1(word, right(char(" "), space))
    return sequence(lambda ns, _eq, body: Binding(ns[0], ns[1:], body), names, spaced(char("=")), term_ref(d))

def let_block(d: int) -> Parser:
    defs = sep_by(definition(d), right(char(";"), space))
    return sequence(
        lambda _o, bindings, _semi, body, _c: LetBlock(bindings, body),
        right(char("{"), space), defs, spaced(char(";")), term_ref(d), right(space, char("}")),
    )

def _items(open_: str, close: str, d: int) -> Parser:
    items = sep_by(term_ref(d), spaced(char(",")))
    return between(right(char(open_), space), right(space, char(close)), items)

def tup(d: int) -> Parser:
    return fmap(TupleLit, _items("(", ")", d))

def lst(d: int) -> Parser:
    return fmap(ListLit, _items("[", "]", d))

def app(d: int) -> Parser:
    terms = sep_by(term_ref(d), char(" "))
    return fmap(Application, between(right(char("("), space), right(space, char(")")), terms))

def adt(d: int) -> Parser:
    field = between(char("("), char(")"), sequence(lambda name, _s, value: (name, value), word, space, term_ref(d)))
    ctor = sequence(lambda name, _s, fields: (name, fields), word, space, sep_by(field, right(char(" "), space)))
    return between(string("#("), char(")"), fmap(Adt, sep_by(ctor, spaced(char("|")))))

def _with_local_defs(parsed, defs):
    return LetBlock(defs, parsed) if defs else parsed

@lru_cache(maxsize=None)
def term(d: int) -> Parser:
    """A sugar at indentation depth ``d``, optionally followed by local
    definitions indented one level deeper.

    The outer alternatives are left-biased, so the first class that parses
    at all wins. The inner group is explored exhaustively and may produce
    several distinct parses of ambiguous input.
    """
    sugar = biased(
        lam(d),
        let_block(d),
        tup(d),
        choice(let_block(d), app(d), string_lit, char_lit, lst(d), adt(d)),
        word_lit,
        natural,
        variable,
    )
    indent = "\n" + " " * ((d + 1) * INDENT_WIDTH)
    local_defs = many(right(string(indent), lazy(lambda: definition(d + 1))))
    return memo(("term", d), sequence(_with_local_defs, sugar, local_defs))
