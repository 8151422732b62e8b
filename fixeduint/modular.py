"""Modular arithmetic over a prime field using 256-bit integers."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from fixeduint.types import U256
from fixeduint.uint import Uint

__all__ = ["PRIME", "add_mod", "mul_small_mod", "main"]

PRIME = "38873241744847760218045702002058062581688990428170398542849190507947196700873"


def add_mod(a: Uint, b: Uint, modulus: Uint) -> Uint:
    """``(a + b) mod modulus``; raises if ``a + b`` overflows the type."""
    return (a + b) % modulus


def mul_small_mod(a: Uint, times: int, modulus: Uint) -> Uint:
    """``(a * times) mod modulus`` computed as a series of modular additions."""
    if times < 1:
        raise ValueError("times must be at least 1")
    base = a % modulus
    result = base
    for _ in range(times - 1):
        result = add_mod(base, result, modulus)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Show a few identities of arithmetic modulo a 256-bit prime."""
    parser = argparse.ArgumentParser(
        prog="fixeduint-modular",
        description="Demonstrate modular arithmetic with 256-bit integers.",
    )
    parser.parse_args(argv)

    p = U256.from_dec_str(PRIME)
    p_minus_1 = (p - 1) % p
    p_plus_1 = (p + 1) % p

    checks = [
        ("(p-1) + (p+1) = 0", add_mod(p_minus_1, p_plus_1, p), U256.zero()),
        ("(p-1) + (p-1) = p-2", add_mod(p_minus_1, p_minus_1, p), p - 2),
        ("(p-1) * 3 = p-3", mul_small_mod(p_minus_1, 3, p), p - 3),
    ]
    print(f"p = {p}")
    for label, got, expected in checks:
        if got != expected:
            raise RuntimeError(f"{label} does not hold: got {got}")
        print(f"{label} (mod p): {got}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())