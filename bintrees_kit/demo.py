"""Worked examples that build small trees, draw them and report measurements."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import Optional, TextIO

from bintrees_kit.node import Node
from bintrees_kit.printing import print_tree


def _three_nodes() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


def _five_nodes() -> Node:
    root = _three_nodes()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven_nodes(left_right: int) -> Node:
    root = _three_nodes()
    root.left.left = Node(6, root.left)
    root.left.right = Node(left_right, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _family_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def _node_label(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.value)


def _example_0(out: TextIO) -> None:
    print_tree(_seven_nodes(16), out)


def _example_1(out: TextIO) -> None:
    root = _three_nodes()
    print_tree(root, out)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _example_2(out: TextIO) -> None:
    root = _three_nodes()
    print_tree(root, out)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _example_3(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    root.delete()


def _report(out: TextIO, root: Node, template: str, measure: Callable[[Node], object]) -> None:
    print_tree(root, out)
    for node in (root, root.right, root.left.right):
        print(template.format(node.value, measure(node)), file=out)


def _example_4(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a leaf: {int(node.is_leaf())}", file=out)


def _example_5(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a root: {int(node.is_root())}", file=out)


def _traversal(out: TextIO, order: Callable[[Node], object]) -> None:
    root = _seven_nodes(56)
    print_tree(root, out)
    for value in order(root):
        print(value, file=out)


def _example_6(out: TextIO) -> None:
    _traversal(out, Node.preorder)


def _example_7(out: TextIO) -> None:
    _traversal(out, Node.inorder)


def _example_8(out: TextIO) -> None:
    _traversal(out, Node.postorder)


def _example_9(out: TextIO) -> None:
    _report(out, _five_nodes(), "Height from {}: {}", Node.height)


def _example_10(out: TextIO) -> None:
    _report(out, _five_nodes(), "Depth of {}: {}", Node.depth)


def _example_11(out: TextIO) -> None:
    _report(out, _five_nodes(), "Size of {}: {}", Node.size)


def _example_12(out: TextIO) -> None:
    _report(out, _five_nodes(), "Leaves in {}: {}", Node.leaves)


def _example_13(out: TextIO) -> None:
    _report(out, _five_nodes(), "Nodes in {}: {}", Node.internal_nodes)


def _example_14(out: TextIO) -> None:
    root = _five_nodes()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {node.balance():+d}", file=out)


def _example_15(out: TextIO) -> None:
    root = _five_nodes()
    root.left.left = Node(10, root.left)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(node.is_full())}", file=out)


def _example_16(out: TextIO) -> None:
    root = _five_nodes()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.left = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.right = Node(10, root.right.right)
    print_tree(root, out)
    print(f"Perfect: {int(root.is_perfect())}", file=out)


def _example_17(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_node_label(node.sibling())}", file=out)


def _example_18(out: TextIO) -> None:
    root = _family_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_node_label(node.uncle())}", file=out)


_EXAMPLES: dict[int, Callable[[TextIO], None]] = {
    0: _example_0,
    1: _example_1,
    2: _example_2,
    3: _example_3,
    4: _example_4,
    5: _example_5,
    6: _example_6,
    7: _example_7,
    8: _example_8,
    9: _example_9,
    10: _example_10,
    11: _example_11,
    12: _example_12,
    13: _example_13,
    14: _example_14,
    15: _example_15,
    16: _example_16,
    17: _example_17,
    18: _example_18,
}


def run_example(number: int, out: Optional[TextIO] = None) -> None:
    """Run the numbered example, writing its output to ``out`` (standard output by default)."""
    try:
        example = _EXAMPLES[number]
    except KeyError:
        raise ValueError(f"no example numbered {number}") from None
    example(out if out is not None else sys.stdout)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the examples named on the command line, or all of them."""
    parser = argparse.ArgumentParser(description="Run the binary tree examples.")
    parser.add_argument(
        "examples",
        nargs="*",
        type=int,
        choices=sorted(_EXAMPLES),
        metavar="N",
        help="example numbers to run (default: all)",
    )
    args = parser.parse_args(argv)
    numbers = args.examples or sorted(_EXAMPLES)
    for position, number in enumerate(numbers):
        if position:
            print()
        run_example(number)
    return 0


if __name__ == "__main__":
    sys.exit(main())