import argparse
import sys

import numpy as np
import matplotlib.pyplot as plt

from huffman import build_tree, code_lengths, symbol_stats

def plot_code_lengths(data: bytes, out_path: str, title: str = ""):
    counts = symbol_stats(data)
    lengths = code_lengths(build_tree(data))
    syms = np.nonzero(counts)[0]
    L = np.array([lengths[int(s)] for s in syms], dtype=np.int64)

    fig = plt.figure(figsize=(10, 4))
    ax1 = fig.add_subplot(1, 2, 1)
    ax1.bar(syms, counts[syms], width=1.0)
    ax1.set_xlim(-1, 256)
    ax1.set_xlabel("byte value")
    ax1.set_ylabel("count")
    ax1.set_title("Symbol frequency", fontsize=9)

    ax2 = fig.add_subplot(1, 2, 2)
    ax2.bar(syms, L, width=1.0, color="tab:orange")
    ax2.set_xlim(-1, 256)
    ax2.set_xlabel("byte value")
    ax2.set_ylabel("codeword length (bits)")
    ax2.set_title("Huffman code length", fontsize=9)

    if title:
        fig.suptitle(title, fontsize=10)
    fig.tight_layout()
    fig.savefig(out_path, dpi=300)
    plt.close(fig)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot byte frequencies and Huffman code lengths")
    ap.add_argument("--input", required=True, help="file to analyse")
    ap.add_argument("--output", required=True, help="figure path (.png)")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()
    if not data:
        print(f"[plot] {args.input} is empty, nothing to plot", file=sys.stderr)
        return 1
    plot_code_lengths(data, args.output, title=args.input)
    print(f"[plot] wrote {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
