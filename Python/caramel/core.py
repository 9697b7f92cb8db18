from dataclasses import dataclass
from typing import Callable, List, Tuple

# ======================================
# Pure Lambda Terms
# ======================================

# Variables are de Bruijn indices: Var(0) is bound by the innermost Lam.
# Traversals below keep their own stacks: Church values nest as deep as
# the numbers they encode.

class PureTerm: pass

@dataclass(frozen=True)
class Lam(PureTerm):
    body: PureTerm
    def __repr__(self): return f"Lam({self.body})"

@dataclass(frozen=True)
class App(PureTerm):
    fn: PureTerm; arg: PureTerm
    def __repr__(self): return f"App({self.fn}, {self.arg})"

@dataclass(frozen=True)
class Var(PureTerm):
    index: int
    def __repr__(self): return f"Var({self.index})"

def lams(count: int, body: PureTerm) -> PureTerm:
    for _ in range(count):
        body = Lam(body)
    return body

def apps(fn: PureTerm, args: List[PureTerm]) -> PureTerm:
    for arg in args:
        fn = App(fn, arg)
    return fn

def spine(term: PureTerm) -> Tuple[PureTerm, List[PureTerm]]:
    """`f a b c` as (f, [a, b, c])."""
    args: List[PureTerm] = []
    while isinstance(term, App):
        args.append(term.arg)
        term = term.fn
    args.reverse()
    return term, args

def map_vars(term: PureTerm, on_var: Callable[[Var, int], PureTerm]) -> PureTerm:
    """Rebuild ``term`` with each variable replaced by ``on_var(var, binders)``,
    ``binders`` counting the Lams between the variable and the root."""
    done: List[PureTerm] = []
    todo: List[Tuple[PureTerm, int, bool]] = [(term, 0, False)]
    while todo:
        t, binders, built = todo.pop()
        if isinstance(t, Var):
            done.append(on_var(t, binders))
        elif isinstance(t, Lam):
            if built:
                done.append(Lam(done.pop()))
            else:
                todo.append((t, binders, True))
                todo.append((t.body, binders + 1, False))
        elif isinstance(t, App):
            if built:
                arg = done.pop()
                done.append(App(done.pop(), arg))
            else:
                todo.append((t, binders, True))
                todo.append((t.arg, binders, False))
                todo.append((t.fn, binders, False))
        else:
            raise TypeError(f"Not a pure term: {t!r}")
    return done[0]

def show_pure(term: PureTerm) -> str:
    out: List[str] = []
    todo: list = [term]
    while todo:
        t = todo.pop()
        if isinstance(t, str):
            out.append(t)
        elif isinstance(t, Lam):
            out.append("(λ ")
            todo.extend([")", t.body])
        elif isinstance(t, App):
            out.append("(")
            todo.extend([")", t.arg, " ", t.fn])
        elif isinstance(t, Var):
            out.append(str(t.index))
        else:
            raise TypeError(f"Not a pure term: {t!r}")
    return "".join(out)

def size(term: PureTerm) -> int:
    count = 0
    todo = [term]
    while todo:
        t = todo.pop()
        count += 1
        if isinstance(t, Lam): todo.append(t.body)
        elif isinstance(t, App): todo.extend([t.fn, t.arg])
    return count
