from typing import Callable, List, Tuple
from .ast import Term, TermFold
from ..errors import UnsupportedOperationError

# ======================================
# Pretty Printer
# ======================================

# An emitter appends its rendering to a shared buffer; nodes compose emitters
# instead of strings so the whole tree is rendered in one linear pass.
Emit = Callable[[List[str]], None]

def _text(s: str) -> Emit:
    return lambda out: out.append(s)

def _joined(open_: str, sep: str, close: str, parts: List[Emit]) -> Emit:
    def emit(out: List[str]):
        out.append(open_)
        for i, part in enumerate(parts):
            if i: out.append(sep)
            part(out)
        out.append(close)
    return emit

class _Printer(TermFold[Emit]):
    def abstraction(self, params, body):
        def emit(out: List[str]):
            out.append("(")
            out.append(" ".join(params))
            out.append(" -> ")
            body(out)
            out.append(")")
        return emit

    def application(self, terms): return _joined("(", " ", ")", terms)
    def variable(self, name): return _text(name)
    def natural(self, value): return _text(str(value))
    def list_lit(self, items): return _joined("[", ",", "]", items)
    def tuple_lit(self, items): return _joined("(", ",", ")", items)
    def char(self, value): return _text(f"'{value}'")
    def string(self, value): return _text(f'"{value}"')
    def word(self, value): return _text(f"#{value}")

    def adt(self, ctors):
        raise UnsupportedOperationError("pretty-printing tagged records is not supported")

    def let(self, bindings: List[Tuple[str, List[str], Emit]], body: Emit):
        def emit(out: List[str]):
            out.append("{")
            if not bindings:
                out.append("; ")
            for name, params, value in bindings:
                out.append(" ".join([name] + list(params)))
                out.append(" = ")
                value(out)
                out.append("; ")
            body(out)
            out.append("}")
        return emit

def pretty(term: Term) -> str:
    """Render a term in Caramel syntax. The reverse of parsing."""
    out: List[str] = []
    _Printer().fold(term)(out)
    return "".join(out)
