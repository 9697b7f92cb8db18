from typing import Callable, List, Mapping, Optional, Tuple
from ..core import PureTerm, Lam, App, Var, lams, apps, map_vars
from ..errors import UnboundVariableError
from ..syntax.ast import Term, TermFold
from ..z3_ops import bitvec

# ======================================
# Church Encodings
# ======================================

# name -> depth of the binder that introduced it
Scope = Mapping[str, int]

# A term still waiting for the scope and binder depth it is placed at.
Scoped = Callable[[Scope, int], PureTerm]

BIT_0 = Lam(Lam(Var(1)))  # selects the first of two arguments
BIT_1 = Lam(Lam(Var(0)))  # selects the second

# Name under which a record field refers to the record being built.
SELF_REFERENCE = "#"

def encode(term: Term, scope: Optional[Scope] = None, depth: int = 0) -> PureTerm:
    """Lower a sugared term to a pure lambda term.

    ``depth`` counts the binders enclosing ``term``; a variable becomes the
    distance to the binder its name maps to in ``scope``.
    """
    return _Encoder().fold(term)(scope or {}, depth)

def _bind(params: List[str], body: Scoped, scope: Scope, depth: int) -> PureTerm:
    inner = dict(scope)
    for i, param in enumerate(params):
        inner[param] = depth + i
    return lams(len(params), body(inner, depth + len(params)))

def _natural(n: int) -> PureTerm:
    body: PureTerm = Var(0)
    for _ in range(n):
        body = App(Var(1), body)
    return Lam(Lam(body))

def _church_list(items: List[PureTerm]) -> PureTerm:
    # items must already be encoded two binders deep
    body: PureTerm = Var(0)
    for item in reversed(items):
        body = App(App(Var(1), item), body)
    return Lam(Lam(body))

def _bit_tuple(value: int, width: int) -> PureTerm:
    return Lam(apps(Var(0), [BIT_1 if bit else BIT_0 for bit in bitvec.to_bits(value, width)]))

def _string(value: str) -> PureTerm:
    # chars are closed terms, their depth does not matter
    return _church_list([_bit_tuple(ord(c), bitvec.CHAR_WIDTH) for c in value])

# ======================================
# Tagged Records
# ======================================

def _pair(first: PureTerm, second: PureTerm) -> PureTerm:
    return Lam(App(App(Var(0), first), second))

def _const_self(thunk: PureTerm) -> PureTerm:
    """Replace each reference to the thunk's own parameter by `λ_. self`."""
    # binders counts the thunk's own Lam too
    return map_vars(thunk, lambda v, binders: Lam(Var(v.index + 1)) if v.index == binders - 1 else v)

def _adt(ctors: List[Tuple[str, List[Tuple[str, Scoped]]]], scope: Scope, depth: int) -> PureTerm:
    """λk. k [(ctor-name, [(field-name, field-thunk), ...]), ...]

    A field body sits under eight binders: `k` (1), the constructor list (2),
    the constructor pair (1), the field list (2), the field pair (1) and the
    thunk (1). The thunk's parameter is the record under construction,
    visible to the field as SELF_REFERENCE.
    """
    inner = {**scope, SELF_REFERENCE: depth + 7}

    def field(name: str, value: Scoped) -> PureTerm:
        thunk = Lam(App(value(inner, depth + 8), Var(7)))
        return _pair(_string(name), _const_self(thunk))

    def ctor(name: str, fields: List[Tuple[str, Scoped]]) -> PureTerm:
        return _pair(_string(name), _church_list([field(f, v) for f, v in fields]))

    return Lam(App(Var(0), _church_list([ctor(name, fields) for name, fields in ctors])))

# ======================================
# Encoder
# ======================================

class _Encoder(TermFold[Scoped]):
    def abstraction(self, params, body):
        return lambda scope, depth: _bind(params, body, scope, depth)

    def application(self, terms):
        if not terms:
            raise ValueError("Cannot encode an empty application")
        fn, args = terms[0], terms[1:]
        return lambda scope, depth: apps(fn(scope, depth), [a(scope, depth) for a in args])

    def variable(self, name):
        def scoped(scope: Scope, depth: int) -> PureTerm:
            if name not in scope:
                raise UnboundVariableError(name)
            return Var(depth - scope[name] - 1)
        return scoped

    def natural(self, value):
        return lambda scope, depth: _natural(value)

    def list_lit(self, items):
        return lambda scope, depth: _church_list([item(scope, depth + 2) for item in items])

    def tuple_lit(self, items):
        return lambda scope, depth: Lam(apps(Var(0), [item(scope, depth + 1) for item in items]))

    def char(self, value):
        return lambda scope, depth: _bit_tuple(ord(value), bitvec.CHAR_WIDTH)

    def word(self, value):
        return lambda scope, depth: _bit_tuple(value, bitvec.WORD_WIDTH)

    def string(self, value):
        return lambda scope, depth: _string(value)

    def adt(self, ctors):
        return lambda scope, depth: _adt(ctors, scope, depth)

    def let(self, bindings, body):
        # (λname. rest) value, with each value outside its own name's scope
        def scoped(scope: Scope, depth: int) -> PureTerm:
            values = []
            for name, params, value in bindings:
                values.append(_bind(params, value, scope, depth))
                scope = {**scope, name: depth}
                depth += 1
            result = body(scope, depth)
            for value in reversed(values):
                result = App(Lam(result), value)
            return result
        return scoped
