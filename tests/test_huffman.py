import io
import random

import numpy as np
import pytest

from bitpack import BitReader
from huffman import (ALPH_SIZE, PSEUDO_EOF, Node, read_for_counts, build_tree,
                     build_codebook, count_leaves)


def _counts(data: bytes):
    return read_for_counts(BitReader(io.BytesIO(data)))


def test_counts_force_eof_and_rewind():
    br = BitReader(io.BytesIO(b"aab"))
    counts = read_for_counts(br)
    assert counts.shape == (ALPH_SIZE + 1,)
    assert counts[ord("a")] == 2
    assert counts[ord("b")] == 1
    assert counts[PSEUDO_EOF] == 1
    assert counts.sum() == 4
    # second pass starts at the beginning again
    assert br.read_bits(8) == ord("a")


def test_counts_empty_input():
    counts = _counts(b"")
    assert counts.sum() == 1
    assert counts[PSEUDO_EOF] == 1


def test_tie_break_leaves_by_symbol_then_merged():
    codes = build_codebook(build_tree(_counts(b"ab")))
    assert codes == {PSEUDO_EOF: "0", ord("a"): "10", ord("b"): "11"}


def test_first_popped_goes_left():
    root = build_tree(_counts(b"A" * 10))
    assert root.left.sym == PSEUDO_EOF
    assert root.right.sym == ord("A")
    assert root.freq == 11


def test_single_repeated_byte_two_leaves():
    root = build_tree(_counts(b"z" * 1000))
    assert count_leaves(root) == 2
    codes = build_codebook(root)
    assert set(codes) == {ord("z"), PSEUDO_EOF}
    assert all(len(c) == 1 for c in codes.values())


def test_empty_input_wraps_eof_with_placeholder():
    root = build_tree(_counts(b""))
    assert not root.is_leaf()
    assert root.left.sym == PSEUDO_EOF
    assert root.right.sym == 0
    assert root.right.freq == 0
    assert build_codebook(root) == {PSEUDO_EOF: "0", 0: "1"}


def test_lone_symbol_placeholder_is_smallest_unused():
    counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    counts[0] = 3
    root = build_tree(counts)
    assert root.left.sym == 0
    assert root.right.sym == 1


def test_no_symbols_rejected():
    with pytest.raises(ValueError):
        build_tree(np.zeros(ALPH_SIZE + 1, dtype=np.int64))


def test_leaf_root_has_no_codebook():
    with pytest.raises(ValueError):
        build_codebook(Node(freq=1, sym=65))


def test_codes_prefix_free_random():
    rng = random.Random(1234)
    for n in (1, 17, 300, 5000):
        data = bytes(rng.getrandbits(8) for _ in range(n))
        codes = build_codebook(build_tree(_counts(data)))
        assert set(codes) == set(data) | {PSEUDO_EOF}
        items = list(codes.values())
        for i, a in enumerate(items):
            assert a
            for b in items[i + 1:]:
                assert not a.startswith(b)
                assert not b.startswith(a)


def test_skewed_counts_get_shorter_codes():
    data = b"e" * 500 + b"t" * 100 + b"q"
    codes = build_codebook(build_tree(_counts(data)))
    assert len(codes[ord("e")]) <= len(codes[ord("t")]) <= len(codes[ord("q")])


def test_build_is_deterministic():
    data = bytes(range(256)) * 3 + b"hello world"
    a = build_codebook(build_tree(_counts(data)))
    b = build_codebook(build_tree(_counts(data)))
    assert a == b
