# Booleans select one of two arguments; pairs are the two-field tuple sugar.
SOURCE = """
logic
    true a b = a
    false a b = b
    if c t e = (c t e)
    not b = (b false true)
    and a b = (a b false)
    or a b = (a true b)
    Y f = ((x -> (f (x x))) (x -> (f (x x))))
    fst p = (p (a b -> a))
    snd p = (p (a b -> b))
"""
