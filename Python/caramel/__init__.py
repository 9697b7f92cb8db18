from .errors import CaramelError, ParseError, UnboundVariableError, UnsupportedOperationError, ReductionLimitExceeded
from .syntax.ast import (
    Term, Abstraction, Application, Variable, Natural, ListLit, TupleLit,
    Char, StringLit, Word32, Adt, Binding, LetBlock,
)
from .syntax.pretty import pretty
from .syntax.letrec import sort_recursive_lets
from .parser.main import parse, parse_all
from .core import PureTerm, Lam, App, Var
from .translate.encoder import encode
from .translate.decoder import decode
from .runtime import normalize, evaluate
from .prelude import with_prelude
from .undeterminable import Tree, DeadEnd, Node, fork, leaf

__all__ = [
    "CaramelError", "ParseError", "UnboundVariableError",
    "UnsupportedOperationError", "ReductionLimitExceeded",
    "Term", "Abstraction", "Application", "Variable", "Natural",
    "ListLit", "TupleLit", "Char", "StringLit", "Word32", "Adt",
    "Binding", "LetBlock",
    "pretty", "sort_recursive_lets", "parse", "parse_all",
    "PureTerm", "Lam", "App", "Var",
    "encode", "decode", "normalize", "evaluate", "with_prelude",
    "Tree", "DeadEnd", "Node", "fork", "leaf",
]
