# Church numerals: n applies its first argument n times to its second.
SOURCE = """
arithmetic
    succ n f x = (f (n f x))
    add m n f x = (m f (n f x))
    mul m n f = (m (n f))
    pow m n = (n m)
    pred n f x = (n (g h -> (h (g f))) (u -> x) (u -> u))
    sub m n = (n pred m)
    is_zero n = (n (x -> false) true)
    leq m n = (is_zero (sub m n))
    eq m n = (and (leq m n) (leq n m))
"""
