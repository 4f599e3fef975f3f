import pytest

from daily_algorithms.trees import (
    TreeNode,
    balance_bst,
    build_balanced,
    preorder_traversal,
)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _is_balanced(node):
    if node is None:
        return True
    return (
        abs(_height(node.left) - _height(node.right)) <= 1
        and _is_balanced(node.left)
        and _is_balanced(node.right)
    )


def _right_chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, right=root)
    return root


def test_inorder_of_manual_tree():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert list(root.inorder()) == [1, 2, 3]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 10, 31])
def test_build_balanced_round_trip(size):
    values = list(range(size))
    root = build_balanced(values)
    assert list(root.inorder()) == values
    assert _is_balanced(root)
    assert _height(root) == size.bit_length()


def test_build_balanced_empty():
    assert build_balanced([]) is None


def test_balance_bst_of_chain():
    values = list(range(1, 16))
    chain = _right_chain(values)
    assert _height(chain) == len(values)
    balanced = balance_bst(chain)
    assert list(balanced.inorder()) == values
    assert _is_balanced(balanced)


def test_balance_bst_none():
    assert balance_bst(None) is None


def test_preorder_of_three():
    assert preorder_traversal(build_balanced([1, 2, 3])) == [2, 1, 3]


def test_preorder_of_chain_is_chain_order():
    values = [5, 6, 7, 8]
    assert preorder_traversal(_right_chain(values)) == values


def test_preorder_empty():
    assert preorder_traversal(None) == []


def test_preorder_is_permutation_of_inorder():
    root = build_balanced(range(20))
    assert sorted(preorder_traversal(root)) == list(root.inorder())