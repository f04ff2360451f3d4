"""Random presentation order for a takeout session."""

import random


def shuffle_indices(n: int, rng: random.Random | None = None) -> list[int]:
    """Return a uniformly random permutation of ``range(n)`` (Fisher-Yates).

    Pass a seeded ``random.Random`` for a reproducible order. ``n == 0``
    gives an empty list.
    """
    if n < 0:
        raise ValueError(f"Cannot shuffle a negative count: {n}")
    if rng is None:
        rng = random.Random()

    indices = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randint(0, i)
        indices[i], indices[j] = indices[j], indices[i]
    return indices
