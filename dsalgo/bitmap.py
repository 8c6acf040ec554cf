"""Bitmap set of small non-negative integers, for duplicate detection."""

from __future__ import annotations


class BitMap:
    """Fixed-range set of integers 0..maxnum stored one bit per value."""

    def __init__(self, maxnum: int) -> None:
        if maxnum < 0:
            raise ValueError("maxnum must be non-negative")
        self.maxnum = maxnum
        self._bits = bytearray(maxnum // 8 + 1)

    def _check_range(self, num: int) -> None:
        if not 0 <= num <= self.maxnum:
            raise ValueError(f"{num} is outside the range 0..{self.maxnum}")

    def insert(self, num: int) -> bool:
        """Add num; return False if it was already present."""
        self._check_range(num)
        if self.find(num):
            return False
        self._bits[num // 8] |= 1 << (num % 8)
        return True

    def erase(self, num: int) -> bool:
        """Remove num; return False if it was not present."""
        self._check_range(num)
        if not self.find(num):
            return False
        self._bits[num // 8] &= ~(1 << (num % 8)) & 0xFF
        return True

    def find(self, num: int) -> bool:
        """Return whether num is present; out-of-range values never are."""
        if not 0 <= num <= self.maxnum:
            return False
        return bool(self._bits[num // 8] >> (num % 8) & 1)

    def __contains__(self, num: object) -> bool:
        return isinstance(num, int) and self.find(num)