from typing import Any, Callable, Dict, List, Tuple

# ======================================
# Parser Types
# ======================================

class Source:
    """The input of one parse call, with its memo table and the farthest
    position any alternative looked at (reported on failure)."""

    def __init__(self, text: str):
        self.text = text
        self.farthest = 0
        self.memo: Dict[Tuple[Any, int], 'Results'] = {}

    def reached(self, pos: int):
        if pos > self.farthest:
            self.farthest = pos

    def location(self, pos: int) -> Tuple[int, int]:
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

# Every way the parser can succeed at a position: (value, next_pos)
Results = List[Tuple[Any, int]]
Parser = Callable[[Source, int], Results]

# ======================================
# Primitive Parsers
# ======================================

def satisfy(pred: Callable[[str], bool]) -> Parser:
    def parser(src: Source, pos: int) -> Results:
        src.reached(pos)
        if pos < len(src.text) and pred(src.text[pos]):
            return [(src.text[pos], pos + 1)]
        return []
    return parser

def char(c: str) -> Parser:
    return satisfy(lambda x: x == c)

def string(s: str) -> Parser:
    def parser(src: Source, pos: int) -> Results:
        if src.text.startswith(s, pos):
            src.reached(pos + len(s))
            return [(s, pos + len(s))]
        matched = 0
        while matched < len(s) and pos + matched < len(src.text) and src.text[pos + matched] == s[matched]:
            matched += 1
        src.reached(pos + matched)
        return []
    return parser

def munch(pred: Callable[[str], bool]) -> Parser:
    """Greedy and deterministic: the longest run of matching characters."""
    def parser(src: Source, pos: int) -> Results:
        end = pos
        while end < len(src.text) and pred(src.text[end]):
            end += 1
        src.reached(end)
        return [(src.text[pos:end], end)]
    return parser

def run_of(pred: Callable[[str], bool]) -> Parser:
    """One or more matching characters, yielding every non-empty prefix of
    the longest run (shortest first)."""
    def parser(src: Source, pos: int) -> Results:
        end = pos
        while end < len(src.text) and pred(src.text[end]):
            end += 1
        src.reached(end)
        return [(src.text[pos:i], i) for i in range(pos + 1, end + 1)]
    return parser

def pure(value: Any) -> Parser:
    return lambda src, pos: [(value, pos)]

# ======================================
# Combinators
# ======================================

def fmap(f: Callable[[Any], Any], p: Parser) -> Parser:
    return lambda src, pos: [(f(v), nxt) for v, nxt in p(src, pos)]

def sequence(build: Callable[..., Any], *parsers: Parser) -> Parser:
    """Run parsers one after another along every combination of their
    results; ``build`` receives one value per parser."""
    def parser(src: Source, pos: int) -> Results:
        results: Results = []
        def go(i: int, at: int, values: List[Any]):
            if i == len(parsers):
                results.append((build(*values), at))
                return
            for v, nxt in parsers[i](src, at):
                go(i + 1, nxt, values + [v])
        go(0, pos, [])
        return results
    return parser

def right(first: Parser, second: Parser) -> Parser:
    return sequence(lambda _, v: v, first, second)

def between(open_: Parser, close: Parser, p: Parser) -> Parser:
    return sequence(lambda _o, v, _c: v, open_, p, close)

def choice(*parsers: Parser) -> Parser:
    """Symmetric choice: every result of every alternative, in order."""
    def parser(src: Source, pos: int) -> Results:
        results: Results = []
        for p in parsers:
            results.extend(p(src, pos))
        return results
    return parser

def biased(*parsers: Parser) -> Parser:
    """Left-biased choice: the first alternative with any result wins and
    the rest are never tried."""
    def parser(src: Source, pos: int) -> Results:
        for p in parsers:
            results = p(src, pos)
            if results:
                return results
        return []
    return parser

def many(p: Parser) -> Parser:
    """Zero or more repetitions, yielding every count (shortest first)."""
    def parser(src: Source, pos: int) -> Results:
        results: Results = [([], pos)]
        frontier: Results = [([], pos)]
        while frontier:
            grown: Results = []
            for vs, at in frontier:
                for v, nxt in p(src, at):
                    if nxt != at:
                        grown.append((vs + [v], nxt))
            results.extend(grown)
            frontier = grown
        return results
    return parser

def many1(p: Parser) -> Parser:
    return sequence(lambda v, vs: [v] + vs, p, many(p))

def sep_by1(p: Parser, sep: Parser) -> Parser:
    return sequence(lambda v, vs: [v] + vs, p, many(right(sep, p)))

def sep_by(p: Parser, sep: Parser) -> Parser:
    return choice(pure([]), sep_by1(p, sep))

def lazy(make: Callable[[], Parser]) -> Parser:
    """Defer building a parser until it runs, for recursive rules."""
    return lambda src, pos: make()(src, pos)

def memo(key: Any, p: Parser) -> Parser:
    def parser(src: Source, pos: int) -> Results:
        k = (key, pos)
        if k not in src.memo:
            src.memo[k] = p(src, pos)
        return src.memo[k]
    return parser
