from .reducer import normalize, beta, shift
from .evaluator import evaluate, Normalizer

__all__ = ["normalize", "beta", "shift", "evaluate", "Normalizer"]
