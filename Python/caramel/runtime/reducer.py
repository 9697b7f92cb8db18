from typing import List, Optional, Tuple
from ..core import PureTerm, Lam, App, Var, apps, spine, map_vars
from ..errors import ReductionLimitExceeded

DEBUG_REDUCE = False

def log(msg: str):
    if DEBUG_REDUCE:
        print(f"[REDUCE] {msg}")

# ======================================
# Substitution
# ======================================

def shift(term: PureTerm, by: int, cutoff: int = 0) -> PureTerm:
    """Add ``by`` to every variable that escapes ``cutoff`` binders."""
    if by == 0:
        return term
    return map_vars(term, lambda v, binders: Var(v.index + by) if v.index >= cutoff + binders else v)

def _substitute(term: PureTerm, depth: int, value: PureTerm) -> PureTerm:
    def on_var(v: Var, binders: int) -> PureTerm:
        target = depth + binders
        if v.index == target:
            return shift(value, target)
        if v.index > target:
            return Var(v.index - 1)
        return v
    return map_vars(term, on_var)

def beta(body: PureTerm, arg: PureTerm) -> PureTerm:
    """The body of `(λ. body) arg` with the argument substituted in."""
    return _substitute(body, 0, arg)

# ======================================
# Normal Order Reduction
# ======================================

class _Budget:
    def __init__(self, max_steps: Optional[int]):
        self.max_steps = max_steps
        self.steps = 0

    def tick(self):
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise ReductionLimitExceeded(self.max_steps)

def _whnf(term: PureTerm, budget: _Budget) -> PureTerm:
    head, args = spine(term)
    while isinstance(head, Lam) and args:
        budget.tick()
        head = beta(head.body, args.pop(0))
        inner, more = spine(head)
        head, args = inner, more + args
    return apps(head, args)

# Work items of _normal
_VISIT, _LAM, _APPS = range(3)

def _normal(term: PureTerm, budget: _Budget) -> PureTerm:
    done: List[PureTerm] = []
    todo: List[Tuple[int, object]] = [(_VISIT, term)]
    while todo:
        action, item = todo.pop()
        if action == _VISIT:
            t = _whnf(item, budget)
            if isinstance(t, Lam):
                todo.append((_LAM, None))
                todo.append((_VISIT, t.body))
            else:
                head, args = spine(t)
                todo.append((_APPS, (head, len(args))))
                # leftmost argument first
                todo.extend((_VISIT, a) for a in reversed(args))
        elif action == _LAM:
            done.append(Lam(done.pop()))
        else:
            head, count = item
            args = done[len(done) - count:]
            del done[len(done) - count:]
            done.append(apps(head, args))
    return done[0]

def normalize(term: PureTerm, max_steps: Optional[int] = None) -> PureTerm:
    """Reduce ``term`` to its normal form, leftmost-outermost first.

    Does not terminate on terms without a normal form unless ``max_steps``
    bounds the number of beta steps.
    """
    budget = _Budget(max_steps)
    result = _normal(term, budget)
    log(f"normal form after {budget.steps} steps")
    return result
