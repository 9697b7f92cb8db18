# Lists are their own right fold: [1,2] is (c n -> (c 1 (c 2 n))).
SOURCE = """
lists
    nil c n = n
    cons h t c n = (c h (t c n))
    is_nil l = (l (h t -> false) true)
    head l = (l (h t -> h) nil)
    tail l = (fst (l (h p -> ((snd p), (cons h (snd p)))) (nil, nil)))
    foldr f z l = (l f z)
    map f l c n = (l (h t -> (c (f h) t)) n)
    filter p l c n = (l (h t -> (p h (c h t) t)) n)
    append a b c n = (a c (b c n))
    length l = (l (h t -> (succ t)) 0)
"""
