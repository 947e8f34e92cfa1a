"""
Reference: Random terrain assignment for new tiles.
Purpose: Seedable RNG so map generation is reproducible in tests.
Dependencies: random.
Ext Hooks: Add weighted terrain tables.
"""

import random


def make_rng(seed=None):
    """Return a private Random; same seed -> same sequence."""
    return random.Random(seed)


def roll_choice(options, rng=None):
    """Uniform pick from options using rng (module RNG when None)."""
    options = list(options)
    if rng is None:
        return random.choice(options)
    return rng.choice(options)

# Ext: terrain generation uses roll_choice(list(Terrain), rng)
