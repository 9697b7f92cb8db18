from functools import lru_cache
from typing import Dict, List, Set
from ..syntax.ast import Term, Abstraction, Binding, LetBlock
from ..syntax.free_vars import free_vars
from ..parser.main import parse
from . import logic, arithmetic, lists

# Later sources may use names from earlier ones.
SOURCES = [logic.SOURCE, arithmetic.SOURCE, lists.SOURCE]

@lru_cache(maxsize=None)
def _bindings() -> Dict[str, Binding]:
    merged: Dict[str, Binding] = {}
    for source in SOURCES:
        block = parse(source)
        for binding in block.bindings:
            merged[binding.name] = binding
    return merged

def names() -> List[str]:
    return list(_bindings())

def _requires(binding: Binding, known: Dict[str, Binding]) -> Set[str]:
    return {n for n in free_vars(Abstraction(binding.params, binding.body)) if n in known}

def with_prelude(term: Term) -> Term:
    """Wrap ``term`` in the prelude definitions it uses, directly or through
    other prelude definitions, in prelude order.

    Names the program binds itself are never free in it, so they are not
    pulled in.
    """
    known = _bindings()
    used: Set[str] = set()
    pending = [n for n in free_vars(term) if n in known]
    while pending:
        name = pending.pop()
        if name not in used:
            used.add(name)
            pending.extend(_requires(known[name], known))
    chosen = [b for name, b in known.items() if name in used]
    return LetBlock(chosen, term) if chosen else term
