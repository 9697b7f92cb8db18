from dataclasses import dataclass
from typing import List, Tuple, Generic, TypeVar, NamedTuple

# ======================================
# Sugared Terms
# ======================================

class Term: pass

@dataclass(frozen=True)
class Abstraction(Term):
    params: List[str]
    body: Term
    def __repr__(self): return f"Abstraction({self.params}, {self.body})"

@dataclass(frozen=True)
class Application(Term):
    terms: List[Term]
    def __repr__(self): return f"Application({self.terms})"

@dataclass(frozen=True)
class Variable(Term):
    name: str
    def __repr__(self): return f"Variable({self.name})"

@dataclass(frozen=True)
class Natural(Term):
    value: int
    def __repr__(self): return f"Natural({self.value})"

@dataclass(frozen=True)
class ListLit(Term):
    items: List[Term]
    def __repr__(self): return f"ListLit({self.items})"

@dataclass(frozen=True)
class TupleLit(Term):
    items: List[Term]
    def __repr__(self): return f"TupleLit({self.items})"

@dataclass(frozen=True)
class Char(Term):
    value: str
    def __repr__(self): return f"Char({self.value!r})"

@dataclass(frozen=True)
class StringLit(Term):
    value: str
    def __repr__(self): return f"StringLit({self.value!r})"

@dataclass(frozen=True)
class Word32(Term):
    value: int
    def __repr__(self): return f"Word32({self.value})"

Field = Tuple[str, Term]
Constructor = Tuple[str, List[Field]]

@dataclass(frozen=True)
class Adt(Term):
    ctors: List[Constructor]
    def __repr__(self): return f"Adt({self.ctors})"

class Binding(NamedTuple):
    name: str
    params: List[str]
    body: Term

@dataclass(frozen=True)
class LetBlock(Term):
    bindings: List[Binding]
    body: Term
    def __repr__(self): return f"LetBlock({self.bindings}, {self.body})"

# ======================================
# Fold
# ======================================

R = TypeVar('R')

class TermFold(Generic[R]):
    """Structural recursion over a Term.

    Children are folded first and handed to one handler per variant, so a
    subclass only describes what happens at a single node. Adding a variant
    means extending ``fold`` and the handler set here.
    """

    def fold(self, term: Term) -> R:
        if isinstance(term, Abstraction):
            return self.abstraction(term.params, self.fold(term.body))
        if isinstance(term, Application):
            return self.application([self.fold(t) for t in term.terms])
        if isinstance(term, Variable):
            return self.variable(term.name)
        if isinstance(term, Natural):
            return self.natural(term.value)
        if isinstance(term, ListLit):
            return self.list_lit([self.fold(t) for t in term.items])
        if isinstance(term, TupleLit):
            return self.tuple_lit([self.fold(t) for t in term.items])
        if isinstance(term, Char):
            return self.char(term.value)
        if isinstance(term, StringLit):
            return self.string(term.value)
        if isinstance(term, Word32):
            return self.word(term.value)
        if isinstance(term, Adt):
            return self.adt([(name, [(field, self.fold(value)) for field, value in fields]) for name, fields in term.ctors])
        if isinstance(term, LetBlock):
            folded = [(b.name, b.params, self.fold(b.body)) for b in term.bindings]
            return self.let(folded, self.fold(term.body))
        raise TypeError(f"Not a Caramel term: {term!r}")

    def abstraction(self, params: List[str], body: R) -> R: raise NotImplementedError
    def application(self, terms: List[R]) -> R: raise NotImplementedError
    def variable(self, name: str) -> R: raise NotImplementedError
    def natural(self, value: int) -> R: raise NotImplementedError
    def list_lit(self, items: List[R]) -> R: raise NotImplementedError
    def tuple_lit(self, items: List[R]) -> R: raise NotImplementedError
    def char(self, value: str) -> R: raise NotImplementedError
    def string(self, value: str) -> R: raise NotImplementedError
    def word(self, value: int) -> R: raise NotImplementedError
    def adt(self, ctors: List[Tuple[str, List[Tuple[str, R]]]]) -> R: raise NotImplementedError
    def let(self, bindings: List[Tuple[str, List[str], R]], body: R) -> R: raise NotImplementedError

class RebuildFold(TermFold[Term]):
    """Identity fold: rebuilds every node. Override the variants to rewrite."""

    def abstraction(self, params, body): return Abstraction(list(params), body)
    def application(self, terms): return Application(terms)
    def variable(self, name): return Variable(name)
    def natural(self, value): return Natural(value)
    def list_lit(self, items): return ListLit(items)
    def tuple_lit(self, items): return TupleLit(items)
    def char(self, value): return Char(value)
    def string(self, value): return StringLit(value)
    def word(self, value): return Word32(value)
    def adt(self, ctors): return Adt(ctors)
    def let(self, bindings, body):
        return LetBlock([Binding(name, list(params), value) for name, params, value in bindings], body)
