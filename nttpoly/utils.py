def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def centered(r: int, modulus: int) -> int:
    """Map a residue in [0, modulus) to the symmetric range (-modulus/2, modulus/2]."""
    r %= modulus
    if r > modulus // 2:
        r -= modulus
    return r
