import argparse, os
from bitpack import BitReader, BitWriter
from bitstream import HuffError
from codec import read_header, decompress
from logging_utils import setup_logging

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .hf file")
    ap.add_argument("--output", required=True, help="path to restored file")
    ap.add_argument("--debug", type=int, default=0, help="1 = phase summaries, 4 = every code")
    ap.add_argument("--log_dir", default=None, help="also write the log to this directory")
    args = ap.parse_args()

    setup_logging("decode", debug=args.debug, log_dir=args.log_dir)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.input, "rb") as fin:
        br = BitReader(fin)
        try:
            # header first: a bad or truncated header leaves --output untouched
            root = read_header(br, debug=args.debug)
            with open(args.output, "wb") as fout:
                stats = decompress(br, BitWriter(fout), debug=args.debug, root=root)
        except HuffError as e:
            # a body error may leave a partially written output; it is not removed
            raise SystemExit(f"[decode] {e.kind}: {e}")

    print(f"[decode] wrote {args.output}")
    print(f"[decode] {os.path.getsize(args.input)}B read -> {stats['symbols']}B restored")

if __name__ == "__main__":
    main()
