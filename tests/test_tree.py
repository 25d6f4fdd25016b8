import math

from dslabs.search.tree import (
    TreeNode,
    balance,
    comparison_stats,
    depth,
    display,
    draw,
    find,
    find_comparisons,
    insert,
    insert_balanced,
    preorder,
)


def _build(values, inserter):
    tree = None
    for value in values:
        if find(tree, value) is None:
            tree = inserter(tree, value)
    return tree


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.left) + [node.data] + _inorder(node.right)


def _check_avl(node):
    if node is None:
        return 0
    left = _check_avl(node.left)
    right = _check_avl(node.right)
    assert abs(left - right) <= 1
    assert node.height == max(left, right) + 1
    return max(left, right) + 1


VALUES = [50, 20, 80, 10, 30, 70, 90, 25, 35, 5]


def test_insert_keeps_search_order():
    tree = _build(VALUES, insert)
    assert _inorder(tree) == sorted(VALUES)


def test_preorder_starts_at_root_and_holds_all_values():
    tree = _build(VALUES, insert)
    order = list(preorder(tree))
    assert order[0] == VALUES[0]
    assert sorted(order) == sorted(VALUES)


def test_sorted_plain_insert_degenerates():
    values = list(range(1, 301))
    tree = _build(values, insert)
    assert depth(tree) == len(values)
    assert _inorder(tree) == values


def test_balanced_insert_keeps_avl_property():
    values = list(range(1, 201))
    tree = _build(values, insert_balanced)
    assert _inorder(tree) == values
    _check_avl(tree)
    assert depth(tree) <= 2 * math.ceil(math.log2(len(values) + 1))


def test_balance_rotates_right_chain():
    leaf = TreeNode(3)
    middle = TreeNode(2, right=leaf, height=2)
    root = balance(TreeNode(1, right=middle))
    assert root.data == 2
    assert root.left.data == 1
    assert root.right.data == 3


def test_balance_rotates_left_right_case():
    inner = TreeNode(2)
    lower = TreeNode(1, right=inner, height=2)
    root = balance(TreeNode(3, left=lower))
    assert (root.data, root.left.data, root.right.data) == (2, 1, 3)


def test_find_present_and_missing():
    tree = _build(VALUES, insert)
    assert find(tree, 35).data == 35
    assert find(tree, 36) is None
    assert find(None, 1) is None


def test_find_comparisons_root_and_missing():
    tree = _build(VALUES, insert)
    assert find_comparisons(tree, VALUES[0]) == 1
    assert find_comparisons(tree, 1000) is None
    assert find_comparisons(None, 1) is None


def test_comparison_stats_match_search_depths():
    tree = _build(VALUES, insert_balanced)
    vertices, comparisons = comparison_stats(tree)
    assert vertices == len(VALUES)
    assert comparisons == sum(find_comparisons(tree, v) - 1 for v in VALUES)


def test_depth_of_empty_tree():
    assert depth(None) == 0
    assert comparison_stats(None) == (0, 0)


def test_draw_contains_each_value_once():
    tree = _build(VALUES, insert)
    picture = draw(tree)
    for value in VALUES:
        assert picture.count(f"[{value}]") == 1
    assert picture.count("[") == len(VALUES)


def test_draw_single_node_and_empty():
    assert draw(TreeNode(5)).strip() == "[5]"
    assert draw(None) == ""


def test_draw_puts_right_subtree_first():
    tree = _build([5, 3, 8], insert)
    picture = draw(tree)
    assert picture.index("[8]") < picture.index("[5]") < picture.index("[3]")


def test_display_indents_by_level():
    tree = _build([5, 3, 8], insert)
    text = display(tree)
    assert "\n5" in text
    assert "\n     8" in text
    assert text.index("8") < text.index("5") < text.index("3")