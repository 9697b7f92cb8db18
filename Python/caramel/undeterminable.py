from typing import Callable, List, Generic, TypeVar

T = TypeVar('T')

# ======================================
# Alternatives
# ======================================

class Tree(Generic[T]):
    """Several possible results, kept in the order they were produced."""

    def flatten_paths(self) -> List[List[T]]:
        raise NotImplementedError

    def alternatives(self) -> List[T]:
        """The final value of every complete path."""
        return [path[-1] for path in self.flatten_paths() if path]

    def is_empty(self) -> bool:
        return not self.flatten_paths()

    def draw_tree(self, show: Callable[[T], str] = str) -> str:
        lines: List[str] = []

        def loop(t: 'Tree[T]', prefix: str, marker: str, child_indent: str):
            if isinstance(t, DeadEnd):
                lines.append(f"{prefix}{marker}DeadEnd")
                return
            assert isinstance(t, Node)
            label = ", ".join(show(v) for v in t.values) or "*"
            lines.append(f"{prefix}{marker}{label}")
            for i, b in enumerate(t.branches):
                last = i == len(t.branches) - 1
                loop(b, prefix + child_indent, "└── " if last else "├── ", "    " if last else "│   ")

        loop(self, "", "", "")
        return "\n".join(lines) + "\n"

class Node(Tree[T]):
    def __init__(self, values: List[T], branches: List['Tree[T]']):
        self.values = values
        self.branches = branches

    def flatten_paths(self) -> List[List[T]]:
        if not self.branches:
            return [list(self.values)]
        paths = []
        for b in self.branches:
            for p in b.flatten_paths():
                paths.append(list(self.values) + p)
        return paths

class DeadEnd(Tree[T]):
    def flatten_paths(self) -> List[List[T]]:
        return []

def leaf(value: T) -> Tree[T]:
    return Node([value], [])

def fork(branches: List[Tree[T]]) -> Tree[T]:
    return Node([], branches)

def from_alternatives(values: List[T]) -> Tree[T]:
    if not values:
        return DeadEnd()
    return fork([leaf(v) for v in values])
