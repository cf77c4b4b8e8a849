from typing import List
from .types import HuffmanNode, HuffmanLeaf


def node_label(node: HuffmanNode) -> str:
    if isinstance(node, HuffmanLeaf):
        return f"'{node.symbol}' ({node.freq})"
    return f"* ({node.freq})"


def render_tree(root: HuffmanNode) -> str:
    """
    Renders the tree depth-first, one node per line, left child before right child.

    Example for "aaabb":
        └─* (5)
         ├─'b' (2)
         └─'a' (3)
    """
    lines: List[str] = []

    def render_node(node, indent, last):
        if last:
            lines.append(indent + "└─" + node_label(node))
            indent += " "
        else:
            lines.append(indent + "├─" + node_label(node))
            indent += "| "

        if isinstance(node, HuffmanLeaf):
            return
        render_node(node.left, indent, False)
        render_node(node.right, indent, True)

    render_node(root, "", True)
    return "\n".join(lines)
