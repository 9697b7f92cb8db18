"""
The sample programs under tests/programs, run the way the command line runs them.
"""

from pathlib import Path

import pytest

from caramel.__main__ import RunOptions, run
from caramel.syntax.pretty import pretty

PROGRAMS = Path(__file__).parent / "programs"

EXPECTED = {
    "sum.caramel": "6",
    "lists.caramel": "([1,4,9],3)",
    "strings.caramel": '"caramel"',
    "words.caramel": "#4294967295",
    "local_defs.caramel": "7",
}


def options():
    opts = RunOptions.default()
    opts.evaluate = True
    opts.use_prelude = True
    opts.max_steps = 1_000_000
    return opts


def test_every_program_has_an_expectation():
    assert sorted(p.name for p in PROGRAMS.glob("*.caramel")) == sorted(EXPECTED)


@pytest.mark.parametrize("name", sorted(EXPECTED))
def test_program(name):
    source = (PROGRAMS / name).read_text(encoding="utf-8")
    assert pretty(run(source, options())) == EXPECTED[name]
