from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from bitpack import EOS

log = logging.getLogger(__name__)

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE  # synthetic end-of-stream symbol, never a byte

@dataclass
class Node:
    freq: int
    sym: Optional[int] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    order: int = 0
    def __lt__(self, other):  # for heapq: weight, then leaves by symbol, then merge order
        return (self.freq, self.order) < (other.freq, other.order)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

def read_for_counts(br) -> np.ndarray:
    """
    First pass: count every 8-bit word of the input, then rewind it.
    PSEUDO_EOF always gets a count of exactly 1.
    """
    counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    counts[PSEUDO_EOF] = 1
    while True:
        word = br.read_bits(BITS_PER_WORD)
        if word == EOS:
            break
        counts[word] += 1
    br.reset()
    return counts

def build_tree(counts) -> Node:
    pq = [Node(freq=int(counts[s]), sym=int(s), order=int(s)) for s in np.flatnonzero(counts)]
    if not pq:
        raise ValueError("No symbol has a positive count")
    heapq.heapify(pq)
    if len(pq) == 1:
        # Edge case: only one symbol -> pair it with an unused placeholder so it gets length 1
        only = pq[0]
        spare = int(np.flatnonzero(np.asarray(counts) == 0)[0])
        log.debug("single-symbol alphabet, padding with placeholder %d", spare)
        return Node(freq=only.freq, left=only, right=Node(freq=0, sym=spare, order=spare),
                    order=ALPH_SIZE + 1)
    merged = 0
    while len(pq) > 1:
        a = heapq.heappop(pq)
        b = heapq.heappop(pq)
        heapq.heappush(pq, Node(freq=a.freq + b.freq, left=a, right=b,
                                order=ALPH_SIZE + 1 + merged))
        merged += 1
    return pq[0]

def build_codebook(node: Node, prefix: str = "", code: Optional[Dict[int, str]] = None) -> Dict[int, str]:
    if code is None:
        code = {}
        if node.is_leaf():
            raise ValueError("Tree root is a leaf: its code would be empty")
    if node.is_leaf():
        code[node.sym] = prefix
    else:
        build_codebook(node.left, prefix + "0", code)
        build_codebook(node.right, prefix + "1", code)
    return code

def count_leaves(node: Node) -> int:
    if node.is_leaf():
        return 1
    return count_leaves(node.left) + count_leaves(node.right)
