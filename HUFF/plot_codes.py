import argparse
from typing import Dict

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from bitpack import BitReader
from huffman import ALPH_SIZE, read_for_counts, build_tree, build_codebook

def plot_code_profile(counts: np.ndarray, codes: Dict[int, str], path: str, title: str = ""):
    """
    Two panels: per-symbol counts (log scale) and code length per symbol.
    """
    syms = np.arange(ALPH_SIZE + 1)
    lengths = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    for sym, code in codes.items():
        lengths[sym] = len(code)
    present = np.asarray(counts) > 0

    plt.figure(figsize=(10, 3))
    plt.subplot(1, 2, 1)
    plt.bar(syms[present], np.asarray(counts)[present], color="#4e79a7")
    plt.yscale("log")
    plt.title("Symbol counts", fontsize=9)
    plt.xlabel("symbol (256 = EOF)")

    plt.subplot(1, 2, 2)
    plt.bar(syms[present], lengths[present], color="#f28e2b")
    plt.title("Code length (bits)", fontsize=9)
    plt.xlabel("symbol (256 = EOF)")

    if title:
        plt.suptitle(title, fontsize=10)
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close()

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to profile")
    ap.add_argument("--output", required=True, help="path to output .png")
    args = ap.parse_args()

    with open(args.input, "rb") as f:
        counts = read_for_counts(BitReader(f))
    codes = build_codebook(build_tree(counts))
    plot_code_profile(counts, codes, args.output, title=args.input)
    print(f"[plot] wrote {args.output}")

if __name__ == "__main__":
    main()
