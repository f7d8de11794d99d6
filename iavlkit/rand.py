"""A lock-guarded pseudo-random generator seeded from OS randomness.

Not suitable for cryptographic use.
"""

from __future__ import annotations

import os
import random
import threading

_STR_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class Rand:
    """Thread-safe pseudo-random generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._lock = threading.Lock()
        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._rng = random.Random(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator to a fixed seed."""
        with self._lock:
            self._rng = random.Random(seed)

    def random_str(self, length: int) -> str:
        """Return a random alphanumeric string of the given length."""
        if length <= 0:
            return ""
        chars: list[str] = []
        while True:
            val = self.int63()
            for _ in range(10):
                v = val & 0x3F
                if v < len(_STR_CHARS):
                    chars.append(_STR_CHARS[v])
                    if len(chars) == length:
                        return "".join(chars)
                val >>= 6

    def uint16(self) -> int:
        return self.uint32() & 0xFFFF

    def uint32(self) -> int:
        with self._lock:
            return self._rng.getrandbits(32)

    def uint64(self) -> int:
        return (self.uint32() << 32) + self.uint32()

    def int63(self) -> int:
        with self._lock:
            return self._rng.getrandbits(63)

    def int31(self) -> int:
        with self._lock:
            return self._rng.getrandbits(31)

    def int63n(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        return self._below(n)

    def int31n(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        return self._below(n)

    def intn(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        return self._below(n)

    def _below(self, n: int) -> int:
        if n <= 0:
            raise ValueError("invalid argument: n must be positive")
        with self._lock:
            return self._rng.randrange(n)

    def float64(self) -> float:
        with self._lock:
            return self._rng.random()

    def bool(self) -> bool:
        return self.int63() % 2 == 0

    def random_bytes(self, n: int) -> bytes:
        """Return n bytes from the internal generator."""
        return bytes(self.int63() & 0xFF for _ in range(n))

    def perm(self, n: int) -> list[int]:
        """Return a random permutation of range(n)."""
        values = list(range(n))
        with self._lock:
            self._rng.shuffle(values)
        return values

    def time(self) -> int:
        """Return a random Unix timestamp in seconds, as a signed 64-bit value."""
        value = self.uint64()
        return value - (1 << 64) if value >= (1 << 63) else value


_global = Rand()


def seed(value: int) -> None:
    """Reseed the shared generator."""
    _global.seed(value)


def rand_str(length: int) -> str:
    return _global.random_str(length)


def rand_int() -> int:
    return _global.int63()


def rand_int31() -> int:
    return _global.int31()


def rand_bytes(n: int) -> bytes:
    return _global.random_bytes(n)


def rand_perm(n: int) -> list[int]:
    return _global.perm(n)