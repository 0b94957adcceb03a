"""
Implementations that trade readability for speed. Each of them has to produce exactly the same
results as its counterpart elsewhere in `isaacrng.lib`.
"""
