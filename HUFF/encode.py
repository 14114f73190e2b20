import argparse
import os
import sys

from bitstream import HEADER_SIZE, write_container
from codec import compress
from errors import HuffmanError
from metrics import compression_ratio, entropy_bits, mean_code_length

SUFFIX = ".huffed"

def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-compress a file into a .huffed container")
    ap.add_argument("--input", required=True, help="file to compress")
    ap.add_argument("--output", help="path to container (default: <input>.huffed)")
    ap.add_argument("--quiet", action="store_true", help="no progress output")
    args = ap.parse_args(argv)

    output = args.output or args.input + SUFFIX

    try:
        with open(args.input, "rb") as f:
            data = f.read()
        if not args.quiet:
            print(f"[encode] read {len(data)} bytes from {args.input}")

        payload, tree = compress(data)

        os.makedirs(os.path.dirname(output) or ".", exist_ok=True)
        with open(output, "wb") as f:
            write_container(f, tree, len(data), payload)
    except (HuffmanError, OSError) as e:
        print(f"[encode] error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        total = HEADER_SIZE + len(payload)
        print(f"[encode] wrote {output}")
        print(f"[encode] original={len(data)} compressed={total} (payload={len(payload)}B) "
              f"ratio={compression_ratio(len(data), total):.4f}")
        print(f"[encode] entropy={entropy_bits(data):.4f} bits/sym, "
              f"mean_len={mean_code_length(tree):.4f} bits/sym, symbols={len(tree.elem)}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
