from typing import Callable, Dict, List, Optional, Tuple
from ..core import PureTerm, Lam, App, Var, spine
from ..errors import UnsupportedOperationError
from ..syntax.ast import (
    Term, Abstraction, Application, Variable, Natural, ListLit, TupleLit,
    Char, StringLit, Word32, Adt,
)
from ..z3_ops import bitvec

# ======================================
# Binder Names
# ======================================

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

def binder_name(depth: int) -> str:
    """a, b, ..., z, aa, ab, ...: one name per binder depth."""
    name = ""
    n = depth + 1
    while n > 0:
        n, r = divmod(n - 1, len(ALPHABET))
        name = ALPHABET[r] + name
    return name

def _variable_name(index: int, depth: int) -> str:
    binder = depth - index - 1
    if binder >= 0:
        return binder_name(binder)
    # escapes every binder of the decoded term
    return f"${-binder - 1}"

# Occurrences of each variable name in a decoded subterm. Names are unique
# per binder depth, so inside the body of a binder every occurrence of its
# name is bound by it.
Uses = Dict[str, int]

def _merge_uses(into: Uses, other: Uses) -> Uses:
    if len(into) < len(other):
        into, other = other, into
    for name, n in other.items():
        into[name] = into.get(name, 0) + n
    return into

# ======================================
# Structural Sugars
# ======================================

def merge_abstractions(term: Term) -> Term:
    """(a -> (b -> c)) becomes (a b -> c)."""
    if isinstance(term, Abstraction) and isinstance(term.body, Abstraction):
        return Abstraction(term.params + term.body.params, term.body.body)
    return term

def natural_sugar(term: Term, uses: Uses) -> Term:
    """(f x -> (f (f (f x)))) becomes 3."""
    if not (isinstance(term, Abstraction) and len(term.params) == 2):
        return term
    fn, arg = term.params
    count = 0
    body = term.body
    while isinstance(body, Application) and len(body.terms) == 2 and body.terms[0] == Variable(fn):
        count += 1
        body = body.terms[1]
    if body == Variable(arg):
        return Natural(count)
    return term

def tuple_sugar(term: Term, uses: Uses) -> Term:
    """(t -> (t 1 2 3)) becomes (1,2,3)."""
    if not (isinstance(term, Abstraction) and len(term.params) == 1):
        return term
    k = term.params[0]
    body = term.body
    # the consumer may only appear in head position
    if isinstance(body, Application) and body.terms[0] == Variable(k) and uses.get(k) == 1:
        return TupleLit(list(body.terms[1:]))
    return term

def list_sugar(term: Term, uses: Uses) -> Term:
    """(c n -> (c 1 (c 2 (c 3 n)))) becomes [1,2,3]."""
    if not (isinstance(term, Abstraction) and len(term.params) == 2):
        return term
    cons, nil = term.params
    items: List[Term] = []
    cell = term.body
    while isinstance(cell, Application) and len(cell.terms) == 3 and cell.terms[0] == Variable(cons):
        items.append(cell.terms[1])
        cell = cell.terms[2]
    if cell == Variable(nil) and uses.get(cons, 0) == len(items) and uses.get(nil) == 1:
        return ListLit(items)
    return term

def _bit(term: Term) -> Optional[bool]:
    # bit 1 selects its second argument, the same term as Church zero, which
    # natural_sugar has already collapsed
    if isinstance(term, Abstraction) and len(term.params) == 2 and term.body == Variable(term.params[0]):
        return False
    if term == Natural(0):
        return True
    return None

def bit_vector_sugar(term: Term, uses: Uses) -> Term:
    """Tuples of 8 or 32 Church booleans become chars and words."""
    if not (isinstance(term, TupleLit) and len(term.items) in (bitvec.CHAR_WIDTH, bitvec.WORD_WIDTH)):
        return term
    bits = [_bit(item) for item in term.items]
    if any(b is None for b in bits):
        return term
    value = bitvec.from_bits(bits)
    if len(bits) == bitvec.CHAR_WIDTH:
        return Char(chr(value))
    return Word32(value)

def string_sugar(term: Term, uses: Uses) -> Term:
    """['a','b','c'] becomes "abc"."""
    if isinstance(term, ListLit) and all(isinstance(item, Char) for item in term.items):
        return StringLit("".join(item.value for item in term.items))
    return term

def resugar_adt(term: Term) -> Term:
    raise UnsupportedOperationError("decoding tagged records is not supported")

# Order matters: bits need naturals collapsed, strings need chars.
SUGARS: List[Callable[[Term, Uses], Term]] = [
    natural_sugar,
    tuple_sugar,
    list_sugar,
    bit_vector_sugar,
    string_sugar,
]

def resugar(term: Term, uses: Uses) -> Term:
    for sugar in SUGARS:
        term = sugar(term, uses)
    return term

# ======================================
# Decoding
# ======================================

def decode(term: PureTerm) -> Term:
    """Read a pure lambda term back as the best sugared term.

    Never fails on a pure term: shapes no sugar recognizes stay plain
    abstractions, applications and variables.
    """
    if isinstance(term, Adt):
        return resugar_adt(term)
    return _decode(term)

# Work items of _decode
_VISIT, _LAM, _APPS = range(3)

def _decode(term: PureTerm) -> Term:
    done: List[Tuple[Term, Uses]] = []
    todo: List[Tuple[int, object, int]] = [(_VISIT, term, 0)]
    while todo:
        action, item, depth = todo.pop()
        if action == _VISIT:
            if isinstance(item, Lam):
                todo.append((_LAM, None, depth))
                todo.append((_VISIT, item.body, depth + 1))
            elif isinstance(item, App):
                # ((f x) y) is read as (f x y)
                head, args = spine(item)
                todo.append((_APPS, len(args) + 1, depth))
                todo.extend((_VISIT, t, depth) for t in reversed([head] + args))
            elif isinstance(item, Var):
                name = _variable_name(item.index, depth)
                done.append((Variable(name), {name: 1}))
            else:
                raise TypeError(f"Not a pure term: {item!r}")
        elif action == _LAM:
            body, uses = done.pop()
            abstraction = merge_abstractions(Abstraction([binder_name(depth)], body))
            done.append((resugar(abstraction, uses), uses))
        else:
            parts = done[len(done) - item:]
            del done[len(done) - item:]
            uses = {}
            for _, part_uses in parts:
                uses = _merge_uses(uses, part_uses)
            done.append((Application([t for t, _ in parts]), uses))
    return done[0][0]
