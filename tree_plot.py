"""
Draws a Huffman tree with matplotlib (vertical, left=0, right=1).

Leaves are laid out left to right in traversal order and every internal node is
centred over its children, so the picture never has crossing edges.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from huffman import HuffmanNode


def layout_tree(root: HuffmanNode) -> Dict[HuffmanNode, Tuple[float, int]]:
    """
    Post-order layout: both children have positions before their parent's x is computed.
    Returns node -> (x, depth).
    """
    positions: Dict[HuffmanNode, Tuple[float, int]] = {}
    next_leaf_x = 0

    # (node, depth, children_done); left is pushed last so it is laid out first
    stack = [(root, 0, False)]
    while stack:
        node, depth, children_done = stack.pop()
        if node is None:
            continue
        if not children_done:
            stack.append((node, depth, True))
            stack.append((node.right, depth + 1, False))
            stack.append((node.left, depth + 1, False))
            continue
        if node.is_leaf:
            x = float(next_leaf_x)
            next_leaf_x += 1
        elif node.left is not None and node.right is not None:
            x = (positions[node.left][0] + positions[node.right][0]) / 2
        elif node.left is not None:
            x = positions[node.left][0]
        else:
            x = positions[node.right][0]
        positions[node] = (x, depth)

    return positions


def symbol_label(symbol) -> str:
    if isinstance(symbol, int) and 0 <= symbol < 256:
        return chr(symbol) if 32 < symbol < 127 else f"0x{symbol:02x}" # byte input
    if isinstance(symbol, str):
        if symbol == " ":
            return "' '"
        if not symbol.isprintable():
            return repr(symbol)
    return str(symbol)


def _edges(root: HuffmanNode):
    stack = [root]
    while stack:
        node = stack.pop()
        if node.left is not None:
            yield node, node.left, "0"
            stack.append(node.left)
        if node.right is not None:
            yield node, node.right, "1"
            stack.append(node.right)


def plot_huffman_tree(root: HuffmanNode, out_path, code_map: Optional[dict] = None,
                      title: str = "Huffman Tree (left=0, right=1)") -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    positions = layout_tree(root)
    n_leaves = sum(1 for node in positions if node.is_leaf)
    depth = max(d for _, d in positions.values())

    fig, ax = plt.subplots(figsize=(max(4, 1.2 * n_leaves), max(3, 1.2 * (depth + 1))))

    # Edges with their bit labels
    for parent, child, bit in _edges(root):
        x1, y1 = positions[parent]
        x2, y2 = positions[child]
        ax.add_line(Line2D([x1, x2], [-y1, -y2], color="darkblue"))
        ax.text((x1 + x2) / 2, (-y1 - y2) / 2 + 0.1, bit, fontsize=9, ha="center", va="bottom", color="darkblue")

    # Nodes: weight inside, symbol and code under each leaf
    for node, (x, y) in positions.items():
        ax.add_patch(Circle((x, -y), 0.2, facecolor="lightsteelblue" if node.is_leaf else "white", edgecolor="black"))
        ax.text(x, -y, str(node.frequency), fontsize=8, ha="center", va="center")
        if node.is_leaf:
            label = symbol_label(node.symbol)
            if code_map is not None and node.symbol in code_map:
                label += f"\n{code_map[node.symbol]}"
            ax.text(x, -y - 0.3, label, fontsize=9, ha="center", va="top")

    ax.set_title(title)
    ax.set_aspect("equal")
    ax.axis("off")

    xs = [x for x, _ in positions.values()]
    ax.set_xlim(min(xs) - 0.8, max(xs) + 0.8)
    ax.set_ylim(-depth - 1.2, 0.6)

    fig.tight_layout()
    fig.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path
