import sys
import os
import time
from functools import partial
from typing import List, Optional

from . import undeterminable, prelude
from .errors import ParseError, UnboundVariableError, UnsupportedOperationError, ReductionLimitExceeded
from .parser import main as parser
from .runtime import evaluator, reducer
from .syntax import letrec
from .syntax.ast import Term
from .syntax.pretty import pretty

class RunOptions:
    def __init__(self, debug: bool, evaluate: bool, use_prelude: bool, show_all: bool, max_steps: Optional[int]):
        self.debug = debug
        self.evaluate = evaluate
        self.use_prelude = use_prelude
        self.show_all = show_all
        self.max_steps = max_steps

    @staticmethod
    def default() -> 'RunOptions':
        return RunOptions(debug=False, evaluate=False, use_prelude=False, show_all=False, max_steps=None)

    @staticmethod
    def from_args(args: List[str]) -> 'RunOptions':
        options = RunOptions.default()
        for arg in args:
            if arg == "debug": options.debug = True
            elif arg == "eval": options.evaluate = True
            elif arg == "prelude": options.use_prelude = True
            elif arg == "all": options.show_all = True
            elif arg.startswith("steps:"):
                options.max_steps = parse_steps(arg[len("steps:"):])
            else:
                print(f"Ignoring unknown option: {arg}")
        return options

def parse_steps(arg: str) -> Optional[int]:
    try:
        n = int(arg)
    except ValueError:
        print(f"Ignoring invalid step limit: {arg}")
        return None
    return n if n > 0 else None

def enable_debug_logs():
    parser.DEBUG_PARSE = True
    letrec.DEBUG_LETREC = True
    reducer.DEBUG_REDUCE = True
    evaluator.DEBUG_EVAL = True

def print_parsing_results(tree: undeterminable.Tree[Term], time_ms: int, show_all: bool):
    print("== Parsing ==")
    alternatives = tree.alternatives()
    if show_all:
        for i, alternative in enumerate(alternatives):
            print(f"  Parse {i}: {alternative}")
    print(f"  Time: {time_ms}ms")
    print(f"  Found {len(alternatives)} parse trees")
    print()

def run(source: str, options: RunOptions) -> Term:
    """Parse ``source`` and, if asked, evaluate it. Errors propagate."""
    parse_start = time.time() * 1000
    tree = parser.parse_all(source)
    parse_end = time.time() * 1000

    if options.debug:
        print(tree.draw_tree())
    if options.debug or options.show_all:
        print_parsing_results(tree, int(parse_end - parse_start), options.show_all)

    term = tree.alternatives()[-1]
    if options.use_prelude:
        term = prelude.with_prelude(term)
    term = letrec.sort_recursive_lets(term)

    if not options.evaluate:
        return term

    eval_start = time.time() * 1000
    result = evaluator.evaluate(term, partial(reducer.normalize, max_steps=options.max_steps))
    eval_end = time.time() * 1000
    if options.debug:
        print("== Evaluation ==")
        print(f"  Time: {int(eval_end - eval_start)}ms")
        print()
    return result

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 1:
        print_usage()
        return 1

    input_path = os.path.abspath(args[0])
    options = RunOptions.from_args(args[1:])

    if options.debug:
        enable_debug_logs()
        print("=== Caramel ===")
        print(f"Input: {input_path}")
        print(f"Prelude: {'enabled' if options.use_prelude else 'disabled'}")
        print(f"Evaluation: {'enabled' if options.evaluate else 'disabled'}")
        print(f"Step limit: {options.max_steps if options.max_steps is not None else 'none'}")
        print()

    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            source = f.read()
    except OSError as e:
        print(f"Failed to read file: {input_path}")
        print(f"Error: {e}")
        return 1

    start = time.time() * 1000
    try:
        result = run(source, options)
        print(f"Result: {pretty(result)}")
    except ParseError as e:
        print(f"Parse error: {e}")
        return 1
    except UnboundVariableError as e:
        print(f"Unbound variable: {e.name}")
        return 1
    except UnsupportedOperationError as e:
        print(f"Unsupported: {e}")
        return 1
    except ReductionLimitExceeded as e:
        print(f"Evaluation error: {e}")
        return 1

    if options.debug:
        print()
        print(f"Total time: {int(time.time() * 1000 - start)}ms")
    return 0

def print_usage():
    print("""Usage:
  python -m caramel <input-file> [options...]

Options:
  eval     - Evaluate the program instead of echoing its parse
  prelude  - Make the standard Church definitions available
  all      - Print every parse alternative
  steps:<n> - Give up after n reduction steps
  debug    - Enable debug output

Examples:
  python -m caramel sum.caramel eval prelude
  python -m caramel sum.caramel debug eval prelude steps:100000
""")

if __name__ == "__main__":
    sys.exit(main())
