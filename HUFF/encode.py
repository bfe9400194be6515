import argparse, os
from bitpack import BitReader, BitWriter
from codec import compress
from metrics import compression_ratio, space_saved
from logging_utils import setup_logging

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to compress")
    ap.add_argument("--output", required=True, help="path to .hf output")
    ap.add_argument("--debug", type=int, default=0, help="1 = phase summaries, 4 = every code")
    ap.add_argument("--log_dir", default=None, help="also write the log to this directory")
    ap.add_argument("--plot", default=None, help="save a code-profile .png here")
    args = ap.parse_args()

    setup_logging("encode", debug=args.debug, log_dir=args.log_dir)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.input, "rb") as fin, open(args.output, "wb") as fout:
        stats = compress(BitReader(fin), BitWriter(fout), debug=args.debug)

    n_in = os.path.getsize(args.input)
    n_out = os.path.getsize(args.output)
    print(f"[encode] wrote {args.output}")
    print(f"[encode] {n_in}B -> {n_out}B ratio={compression_ratio(n_in, n_out):.3f} "
          f"saved={space_saved(n_in, n_out):.1f}% symbols={stats['distinct']}")
    print(f"[encode] entropy={stats['entropy']:.3f} bits/sym, mean code={stats['mean_bits']:.3f} bits/sym")

    if args.plot:
        # matplotlib is only needed here
        from plot_codes import plot_code_profile
        from huffman import read_for_counts, build_tree, build_codebook
        with open(args.input, "rb") as fin:
            counts = read_for_counts(BitReader(fin))
        plot_code_profile(counts, build_codebook(build_tree(counts)), args.plot, title=args.input)
        print(f"[encode] wrote {args.plot}")

if __name__ == "__main__":
    main()
