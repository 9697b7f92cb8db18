from typing import Callable, Dict, Iterable, Set
from .ast import Term, TermFold

# ======================================
# Free Variables
# ======================================

# Each folded node is a function from the names bound around it to the names
# it leaves free. The bound names are one shared table of binder counts,
# updated in place on the way down and restored on the way back.
Bound = Dict[str, int]
Free = Callable[[Bound], Set[str]]

_NONE: Free = lambda bound: set()

def _bind(bound: Bound, names: Iterable[str]):
    for name in names:
        bound[name] = bound.get(name, 0) + 1

def _unbind(bound: Bound, names: Iterable[str]):
    for name in names:
        bound[name] -= 1
        if not bound[name]:
            del bound[name]

def _union(parts) -> Free:
    def free(bound: Bound) -> Set[str]:
        names: Set[str] = set()
        for part in parts:
            found = part(bound)
            if len(found) > len(names):
                names, found = found, names
            names |= found
        return names
    return free

class _FreeVars(TermFold[Free]):
    def abstraction(self, params, body):
        def free(bound: Bound) -> Set[str]:
            _bind(bound, params)
            try:
                return body(bound)
            finally:
                _unbind(bound, params)
        return free

    def application(self, terms): return _union(terms)

    def variable(self, name):
        return lambda bound: set() if name in bound else {name}

    def natural(self, value): return _NONE
    def list_lit(self, items): return _union(items)
    def tuple_lit(self, items): return _union(items)
    def char(self, value): return _NONE
    def string(self, value): return _NONE
    def word(self, value): return _NONE

    def adt(self, ctors):
        return _union([value for _, fields in ctors for _, value in fields])

    def let(self, bindings, body):
        names = [name for name, _, _ in bindings]
        def free(bound: Bound) -> Set[str]:
            _bind(bound, names)
            try:
                result = body(bound)
                for _, params, value in bindings:
                    _bind(bound, params)
                    try:
                        result |= value(bound)
                    finally:
                        _unbind(bound, params)
                return result
            finally:
                _unbind(bound, names)
        return free

def free_vars(term: Term) -> Set[str]:
    """Names occurring in ``term`` that no enclosing binder captures."""
    return _FreeVars().fold(term)({})

def is_free_in(name: str, term: Term) -> bool:
    return name in free_vars(term)
