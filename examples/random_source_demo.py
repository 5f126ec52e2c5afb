#!/usr/bin/env python3
"""
Simple demo script showing range draws from a RandomSource.
"""

import numpy as np
from py_drills.core import RandomSource, tally_draws


def main():
    """Demonstrate range draws."""
    print("Py-Drills Random Source Demo")
    print("=" * 40)

    source = RandomSource()
    print(f"\nSeed entropy: {source.entropy}")

    print("\nTen dice rolls:")
    print("  " + " ".join(str(source.get(1, 6)) for _ in range(10)))

    print("\nTyped draws:")
    for dtype in [np.int16, np.uint32, np.uint64]:
        value = source.get(0, 1000, dtype=dtype)
        print(f"  {np.dtype(dtype).name:>7}: {value} ({type(value).__name__})")

    print("\nSeeded sources repeat:")
    for _ in range(2):
        seeded = RandomSource(2024)
        print("  " + " ".join(str(seeded.get(1, 100)) for _ in range(8)))

    print("\nUniformity over 1,000,000 draws of 1-100:")
    tally = tally_draws(source, 1, 100, 1_000_000)
    print(f"  min count: {tally.counts.min()}")
    print(f"  max count: {tally.counts.max()}")
    print(f"  chi-square: {tally.chi_square:.2f} (99 degrees of freedom)")
    print(f"  out of range: {tally.out_of_range}")


if __name__ == "__main__":
    main()
