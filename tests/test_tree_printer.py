from utils.huffman_encoder import count_frequencies, build_huffman_tree
from utils.tree_printer import render_tree, node_label
from utils.types import HuffmanLeaf


def test_render_two_symbols():
    root = build_huffman_tree(count_frequencies("aaabb"))

    assert render_tree(root) == "\n".join([
        "└─* (5)",
        " ├─'b' (2)",
        " └─'a' (3)",
    ])


def test_render_nested_tree():
    root = build_huffman_tree(count_frequencies("abracadabra"))

    assert render_tree(root) == "\n".join([
        "└─* (11)",
        " ├─'a' (5)",
        " └─* (6)",
        "  ├─* (2)",
        "  | ├─'c' (1)",
        "  | └─'d' (1)",
        "  └─* (4)",
        "   ├─'b' (2)",
        "   └─'r' (2)",
    ])


def test_render_single_leaf():
    assert render_tree(HuffmanLeaf("a", 4)) == "└─'a' (4)"


def test_space_label():
    assert node_label(HuffmanLeaf(" ", 2)) == "' ' (2)"
