import argparse
import os
import sys

from bitstream import read_container
from codec import decompress
from encode import SUFFIX
from errors import HuffmanError

def default_output(path: str) -> str:
    if path.endswith(SUFFIX) and len(path) > len(SUFFIX):
        return path[:-len(SUFFIX)]
    return path + ".out"

def main(argv=None):
    ap = argparse.ArgumentParser(description="Restore a file from a .huffed container")
    ap.add_argument("--input", required=True, help="path to .huffed container")
    ap.add_argument("--output", help="path to restored file (default: input without .huffed)")
    ap.add_argument("--quiet", action="store_true", help="no progress output")
    args = ap.parse_args(argv)

    output = args.output or default_output(args.input)

    try:
        with open(args.input, "rb") as f:
            tree, original_length, payload = read_container(f)
        data = decompress(payload, tree, original_length)

        os.makedirs(os.path.dirname(output) or ".", exist_ok=True)
        with open(output, "wb") as f:
            f.write(data)
    except (HuffmanError, OSError) as e:
        print(f"[decode] error: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"[decode] wrote {output} ({len(data)} bytes, {len(tree.elem)} symbols)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
