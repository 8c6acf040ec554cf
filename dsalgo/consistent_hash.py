"""Consistent hashing ring with virtual nodes."""

from __future__ import annotations

import hashlib
from bisect import bisect_left, insort
from dataclasses import dataclass


def _ring_hash(text: str) -> int:
    """Stable 64-bit hash of a string, identical across processes."""
    return int.from_bytes(hashlib.blake2b(text.encode("utf-8"), digest_size=8).digest(), "big")


@dataclass(frozen=True)
class PhysicalNode:
    """A real server identified by its address and the resource it holds."""

    ip: str
    source: str = "source"

    def describe(self) -> str:
        return f"{self.source} in {self.ip}"


@dataclass(frozen=True)
class VirtualNode:
    """One of several ring positions that stand for a physical node."""

    physical: PhysicalNode
    index: int

    @property
    def name(self) -> str:
        return f"{self.physical.ip}#{self.index}"


class ConsistentHash:
    """Ordered hash ring mapping keys to physical nodes via virtual nodes."""

    def __init__(self, vnode_count: int = 10) -> None:
        if vnode_count < 1:
            raise ValueError("vnode_count must be at least 1")
        self.vnode_count = vnode_count
        self._ring: dict[int, VirtualNode] = {}
        self._positions: list[int] = []

    def add_node(self, node: PhysicalNode) -> None:
        """Place vnode_count virtual nodes for node on the ring."""
        for index in range(self.vnode_count):
            vnode = VirtualNode(node, index)
            position = _ring_hash(vnode.name)
            if position not in self._ring:
                insort(self._positions, position)
            self._ring[position] = vnode

    def find(self, key: str) -> str:
        """Return the description of the node responsible for key.

        Raises LookupError when the ring holds no nodes.
        """
        if not self._positions:
            raise LookupError("no nodes")
        slot = bisect_left(self._positions, _ring_hash(key))
        if slot == len(self._positions):
            slot = 0  # wrap around clockwise to the first position
        return self._ring[self._positions[slot]].physical.describe()

    def __len__(self) -> int:
        return len(self._positions)