from ..syntax.ast import Term
from ..errors import ParseError
from .. import undeterminable
from .combinators import Source
from .grammar import term

COMMENT_MARKER = "--"

DEBUG_PARSE = False

def log(msg: str):
    if DEBUG_PARSE:
        print(f"[PARSE] {msg}")

def strip_comments(source: str) -> str:
    """Drop line comments, trailing spaces and blank lines."""
    lines = []
    for line in source.splitlines():
        line = line.split(COMMENT_MARKER, 1)[0].rstrip(" ")
        if line.strip():
            lines.append(line)
    return "\n".join(lines)

def _failure(src: Source) -> ParseError:
    pos = src.farthest
    line, column = src.location(pos)
    found = repr(src.text[pos]) if pos < len(src.text) else "end of input"
    return ParseError(f"Unexpected {found}", pos, line, column)

def parse_all(source: str) -> undeterminable.Tree[Term]:
    """Every parse of ``source`` that consumes the whole input, in the order
    the grammar produced them."""
    src = Source(strip_comments(source))
    results = term(0)(src, 0)
    full = [t for t, end in results if end == len(src.text)]
    log(f"{len(results)} partial parses, {len(full)} complete")
    if not full:
        raise _failure(src)
    return undeterminable.from_alternatives(full)

def parse(source: str) -> Term:
    """Parse Caramel source. Ambiguous input resolves to the last parse
    produced, a fixed tie-break."""
    return parse_all(source).alternatives()[-1]
