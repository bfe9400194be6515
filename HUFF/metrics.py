from typing import Dict

import numpy as np

def compression_ratio(n_in: int, n_out: int) -> float:
    """Compressed / original size (lower is better)."""
    if n_in == 0:
        return float("inf") if n_out else 1.0
    return float(n_out) / float(n_in)

def space_saved(n_in: int, n_out: int) -> float:
    """Percentage of the original size saved."""
    return (1.0 - compression_ratio(n_in, n_out)) * 100.0

def entropy_bits(counts: np.ndarray) -> float:
    """Empirical entropy in bits/symbol of a count table."""
    c = np.asarray(counts, dtype=np.float64)
    total = c.sum()
    if total == 0:
        return 0.0
    p = c[c > 0] / total
    return float(-(p * np.log2(p)).sum())

def mean_code_length(counts: np.ndarray, codes: Dict[int, str]) -> float:
    """Average code length in bits/symbol, weighted by counts."""
    c = np.asarray(counts, dtype=np.float64)
    total = c.sum()
    if total == 0:
        return 0.0
    lengths = np.zeros(c.shape[0], dtype=np.float64)
    for sym, code in codes.items():
        lengths[sym] = len(code)
    return float((c * lengths).sum() / total)
