import io

from bintrees_kit.node import Node
from bintrees_kit.printing import print_tree, render


def _three_nodes():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


def test_render_three_nodes():
    assert render(_three_nodes()) == "  .--(098)--.\n(012)     (402)\n"


def test_render_right_only():
    root = Node(98)
    root.right = Node(402, root)
    assert render(root) == "(098)--.\n     (402)\n"


def test_render_single_node():
    assert render(Node(98)) == "(098)\n"


def test_render_none_is_empty():
    assert render(None) == ""


def test_row_count_matches_height():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    root.insert_left(54)
    lines = render(root).splitlines()
    assert len(lines) == root.height() + 1
    assert all(line == line.rstrip() for line in lines)
    for value in (98, 12, 6, 16, 402, 256, 512, 54):
        assert f"({value:03d})" in render(root)


def test_labels_keep_inorder_positions():
    root = _three_nodes()
    root.insert_right(128)
    text = render(root)
    positions = [text.replace("\n", " " * 1000).index(f"({v:03d})") % 1000 for v in root.inorder()]
    flat = [text.splitlines()[0], *text.splitlines()[1:]]
    assert len(flat) == root.height() + 1
    columns = []
    for value in root.inorder():
        label = f"({value:03d})"
        for line in flat:
            if label in line:
                columns.append(line.index(label))
                break
    assert columns == sorted(columns)
    assert len(positions) == root.size()


def test_wide_values_keep_full_label():
    root = Node(1234)
    root.left = Node(7, root)
    text = render(root)
    assert "(1234)" in text
    assert "(007)" in text


def test_print_tree_writes_render():
    buffer = io.StringIO()
    root = _three_nodes()
    print_tree(root, buffer)
    assert buffer.getvalue() == render(root)


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(Node(98))
    assert capsys.readouterr().out == "(098)\n"