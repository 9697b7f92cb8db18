from typing import List
import z3

CHAR_WIDTH = 8
WORD_WIDTH = 32

def _concrete(expr: z3.BitVecRef) -> int:
    simple = z3.simplify(expr)
    if not isinstance(simple, z3.BitVecNumRef):
        raise RuntimeError(f"Z3 result not concrete: {simple}")
    return simple.as_long()

def truncate(value: int, width: int) -> int:
    """``value`` as an unsigned ``width``-bit integer (wrapping)."""
    return z3.BitVecVal(value, width).as_long()

def to_bits(value: int, width: int) -> List[bool]:
    """The ``width`` low bits of ``value``, most significant first."""
    bv = z3.BitVecVal(value, width)
    return [_concrete(z3.Extract(i, i, bv)) == 1 for i in range(width - 1, -1, -1)]

def from_bits(bits: List[bool]) -> int:
    """Read bits, most significant first, as an unsigned integer."""
    if not bits:
        return 0
    bv = z3.BitVecVal(int(bits[0]), 1)
    for bit in bits[1:]:
        bv = z3.Concat(bv, z3.BitVecVal(int(bit), 1))
    return _concrete(bv)
