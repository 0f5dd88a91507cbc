"""
Huffman coding demo

Runs the whole pipeline on one piece of text and prints what each stage produced:
frequency count -> tree -> code table -> encoded bits -> decoded text

How to run:
  python demo.py
  python demo.py --text "mississippi river"
  python demo.py --text ABRACADABRA --plot results/tree.png
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

import huffman as huff


@dataclass
class PipelineResult:
    frequencies: Dict[str, int]
    root: huff.HuffmanNode
    code_map: Dict[str, str]
    encoded: str
    decoded: str
    encoded_bits: int
    fixed_width_bits: int
    correctness_ok: int  # 1 or 0


def run_pipeline(text: str) -> PipelineResult:
    ft = huff.frequency_table(text)
    root = huff.build_huffman_tree(ft)  # raises EmptyAlphabetError on empty text
    code_map = huff.generate_huffman_codes(root)

    encoded = huff.huffman_encode(text, code_map)
    decoded = huff.huffman_decode(encoded, root, joiner="".join)

    return PipelineResult(
        frequencies=ft,
        root=root,
        code_map=code_map,
        encoded=encoded,
        decoded=decoded,
        encoded_bits=len(encoded),
        fixed_width_bits=huff.fixed_width_length(ft),
        correctness_ok=1 if decoded == text else 0,
    )


def print_result(result: PipelineResult) -> None:
    print("symbol codes:")
    # most frequent first, ties in symbol order
    for symbol in sorted(result.code_map, key=lambda s: (-result.frequencies[s], s)):
        print(f"  {symbol!r}: {result.code_map[symbol]}  (x{result.frequencies[symbol]})")
    print(f"coded string: {result.encoded}")
    print(f"decoded string: {result.decoded}")
    print(f"bits: {result.encoded_bits} (fixed-width code would need {result.fixed_width_bits})")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Build a Huffman code for a text, encode it and decode it back.")
    ap.add_argument("--text", type=str, default="ABRACADABRA", help="Text to encode")
    ap.add_argument("--plot", type=str, default=None, help="Optional PNG path for a drawing of the Huffman tree")
    args = ap.parse_args(argv)

    try:
        result = run_pipeline(args.text)
    except huff.HuffmanError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print_result(result)

    if args.plot:
        # matplotlib is only needed for the drawing
        from tree_plot import plot_huffman_tree
        out = plot_huffman_tree(result.root, args.plot, code_map=result.code_map,
                                title=f"Huffman Tree for {args.text!r}")
        print("Tree saved to:", out.resolve())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
