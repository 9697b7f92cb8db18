from typing import Callable
from ..core import PureTerm, show_pure, size
from ..syntax.ast import Term
from ..translate.encoder import encode
from ..translate.decoder import decode
from . import reducer

DEBUG_EVAL = False

def log(msg: str):
    if DEBUG_EVAL:
        print(f"[EVAL] {msg}")

Normalizer = Callable[[PureTerm], PureTerm]

def evaluate(term: Term, normalize: Normalizer = reducer.normalize) -> Term:
    """Run a sugared term and read its normal form back as a sugared term.

    Unbound variables and normalizer failures propagate to the caller.
    """
    pure = encode(term)
    log(f"encoded: {size(pure)} nodes")
    normal = normalize(pure)
    log(f"normal form: {show_pure(normal)}")
    return decode(normal)
