# bintrees_kit

A small library of binary tree nodes. Every node holds an integer value and
knows its parent and its two children. The library offers traversals, size
and shape measurements, and a drawing of the tree as ASCII art.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintrees_kit.node import Node

root = Node(98, None)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)
```

`Node(value, parent)` makes a node; `parent` defaults to `None`. Children can
also be attached directly through the `left` and `right` attributes.

`insert_left` and `insert_right` create a new child in that position and
return it. If a child is already there, it moves down one level and becomes
the same-side child of the new node.

## Querying a tree

| Method | Result |
| --- | --- |
| `is_leaf()` / `is_root()` | whether the node has no children / no parent |
| `preorder()`, `inorder()`, `postorder()` | iterators over node values |
| `height()` | edges on the longest downward path (0 for a leaf) |
| `depth()` | edges up to the root |
| `size()` | number of nodes in the subtree |
| `leaves()` | number of leaves in the subtree |
| `internal_nodes()` | number of nodes with at least one child |
| `balance()` | height of the left subtree minus height of the right subtree |
| `is_full()` | every node has zero or two children |
| `is_perfect()` | full, and all leaves sit at the same depth |
| `sibling()` / `uncle()` | the related node, or `None` |
| `delete()` | detaches the node from its parent and unlinks its whole subtree |

```python
list(root.preorder())   # [98, 12, 54, 402, 128]
root.height()           # 2
root.size()             # 5
```

## Drawing a tree

```python
from bintrees_kit.printing import print_tree, render

print_tree(root, None)   # writes to standard output
text = render(root)      # the same drawing as a string
```

Each value is shown as a three-digit, zero-padded label. Every row ends in a
newline and trailing spaces are removed; `render(None)` returns an empty
string. For the tree above the output is:

```
  .-------(098)--.
(012)--.       (402)--.
     (054)          (128)
```

## Demonstrations

The `bintrees-demo` command runs numbered example scenarios, 0 to 18. Each
builds a small tree, prints it, and reports one kind of measurement. With no
arguments every scenario runs, separated by blank lines.

```
bintrees-demo 9
```

From Python, `run_example(number, out)` in `bintrees_kit.demo` writes one
scenario to a text stream (standard output when `out` is `None`); an unknown
number raises `ValueError`.

## Limits

The trees live only in memory: there is no way to save or load them, and no
search-tree ordering, balancing or heap operations are provided.