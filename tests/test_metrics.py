import io
import logging
import random

import numpy as np
import pytest

from bitpack import BitReader
from huffman import read_for_counts, build_tree, build_codebook
from metrics import compression_ratio, space_saved, entropy_bits, mean_code_length
from logging_utils import level_for_debug, setup_logging


def test_ratio_and_space_saved():
    assert compression_ratio(100, 50) == 0.5
    assert space_saved(100, 50) == 50.0
    assert compression_ratio(0, 0) == 1.0


def test_entropy():
    assert entropy_bits(np.array([1, 1])) == pytest.approx(1.0)
    assert entropy_bits(np.array([4, 0, 0])) == 0.0
    assert entropy_bits(np.zeros(3)) == 0.0


def test_mean_code_length():
    assert mean_code_length(np.array([1, 1]), {0: "0", 1: "1"}) == 1.0
    assert mean_code_length(np.array([3, 1]), {0: "0", 1: "10"}) == pytest.approx(1.25)


def test_huffman_within_one_bit_of_entropy():
    rng = random.Random(99)
    data = bytes(min(255, int(rng.expovariate(0.05))) for _ in range(20000))
    counts = read_for_counts(BitReader(io.BytesIO(data)))
    codes = build_codebook(build_tree(counts))
    h = entropy_bits(counts)
    mean = mean_code_length(counts, codes)
    assert h <= mean < h + 1


def test_level_for_debug():
    assert level_for_debug(0) == logging.WARNING
    assert level_for_debug(1) == logging.INFO
    assert level_for_debug(4) == logging.DEBUG


def test_setup_logging_skips_log_file_when_configured(tmp_path):
    root = logging.getLogger()
    h = logging.NullHandler()
    root.addHandler(h)
    try:
        setup_logging("t", debug=1, log_dir=str(tmp_path / "logs"))
    finally:
        root.removeHandler(h)
    assert not (tmp_path / "logs").exists()


def test_setup_logging_writes_log_file(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    setup_logging("t", debug=1, log_dir=str(tmp_path / "logs"))
    added = list(root.handlers)
    for h in added:
        h.close()
    assert any(isinstance(h, logging.FileHandler) for h in added)
    assert len(list((tmp_path / "logs").glob("run_*.log"))) == 1
