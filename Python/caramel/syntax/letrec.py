from typing import List, Set, Tuple
from .ast import Term, Abstraction, Binding, LetBlock, RebuildFold
from .free_vars import free_vars

# ======================================
# Recursive Let Sorting
# ======================================

DEBUG_LETREC = False

def log(msg: str):
    if DEBUG_LETREC:
        print(f"[LETREC] {msg}")

# (name, sibling dependencies, binding)
Node = Tuple[str, Set[str], Binding]

def _node(binding: Binding, names: Set[str]) -> Node:
    name, params, body = binding
    free = free_vars(Abstraction(params, body))
    if name in free:
        # Expose a fixed-point slot: `sum n = ...sum...` becomes `sum sum n = ...`
        log(f"self-recursive binding `{name}`")
        binding = Binding(name, [name] + list(params), body)
    deps = {n for n in free if n in names and n != name}
    return name, deps, binding

def sort_topologically(nodes: List[Node]) -> List[Binding]:
    """Order bindings after the siblings they depend on.

    Repeated passes over the pending list, quadratic in the number of
    siblings. A pass that places nothing means a cycle; the earliest pending
    binding is placed to break it.
    """
    ordered: List[Binding] = []
    defined: Set[str] = set()
    pending = list(nodes)
    while pending:
        rest: List[Node] = []
        for node in pending:
            name, deps, binding = node
            if deps <= defined:
                ordered.append(binding)
                defined.add(name)
            else:
                rest.append(node)
        if rest and len(rest) == len(pending):
            name, deps, binding = rest.pop(0)
            log(f"cycle through `{name}` (depends on {sorted(deps - defined)})")
            ordered.append(binding)
            defined.add(name)
        pending = rest
    return ordered

class _LetSorter(RebuildFold):
    def let(self, bindings, body):
        names = {name for name, _, _ in bindings}
        nodes = [_node(Binding(name, list(params), value), names) for name, params, value in bindings]
        return LetBlock(sort_topologically(nodes), body)

def sort_recursive_lets(term: Term) -> Term:
    """Sort every let block by dependency and add fixed-point slots to
    self-recursive bindings, so `sum n = ...` can be used as `(Y sum 3)`."""
    return _LetSorter().fold(term)
