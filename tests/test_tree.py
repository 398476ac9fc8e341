import pytest

from dsakit.tree import BinaryTree, Node, bst_insert

SAMPLE = [10, 11, 9, 7, 12, 15, 8]


@pytest.fixture
def sample():
    return BinaryTree(SAMPLE)


def test_level_order_insert_shape(sample):
    assert sample.inorder() == [7, 11, 12, 10, 15, 9, 8]
    assert sample.preorder() == [10, 11, 7, 12, 9, 15, 8]
    assert len(sample) == 7


def test_delete_replaces_with_deepest(sample):
    assert sample.delete(11) is True
    assert sample.inorder() == [7, 8, 12, 10, 15, 9]
    assert sample.preorder() == [10, 8, 7, 12, 9, 15]
    assert len(sample) == 6


def test_queries_after_delete(sample):
    sample.delete(11)
    assert sample.height() == 2
    assert sample.maximum() == 15
    assert sample.minimum() == 7
    assert sample.left_view() == [10, 8, 7]
    assert sample.right_view() == [10, 9, 15]


def test_lowest_common_ancestor(sample):
    sample.delete(11)
    assert sample.lowest_common_ancestor(11, 9).data == 9
    assert sample.lowest_common_ancestor(7, 12).data == 8
    assert sample.lowest_common_ancestor(7, 15).data == 10
    assert sample.lowest_common_ancestor(100, 200) is None


def test_delete_only_root():
    tree = BinaryTree([5])
    assert tree.delete(4) is False
    assert len(tree) == 1
    assert tree.delete(5) is True
    assert len(tree) == 0
    assert tree.root is None


def test_delete_deepest_itself():
    tree = BinaryTree([1, 2, 3])
    assert tree.delete(3) is True
    assert tree.preorder() == [1, 2]


def test_empty_tree():
    tree = BinaryTree()
    assert len(tree) == 0
    assert tree.height() == 0
    assert tree.left_view() == []
    assert tree.delete(1) is False
    assert tree.convert_to_sum_tree() == 0
    with pytest.raises(ValueError):
        tree.maximum()
    with pytest.raises(ValueError):
        tree.minimum()


def test_single_node_height_zero():
    assert BinaryTree([4]).height() == 0


def test_mirror_reverses_inorder(sample):
    before = sample.inorder()
    sample.mirror()
    assert sample.inorder() == before[::-1]
    sample.mirror()
    assert sample.inorder() == before


def test_sum_tree(sample):
    total = sample.convert_to_sum_tree()
    assert total == sum(SAMPLE)
    assert sample.root.data == sum(SAMPLE) - 10
    leaves = [7, 12, 15, 8]
    assert sample.inorder()[0] == 0
    assert sample.preorder().count(0) == len(leaves)


def test_doubly_linked_list(sample):
    expected = sample.inorder()
    head = sample.to_doubly_linked_list()
    assert head.left is None
    forward = []
    node, last = head, None
    while node is not None:
        forward.append(node.data)
        assert node.left is last
        last, node = node, node.right
    assert forward == expected
    assert sample.root is None


def test_bst_insert_gives_sorted_inorder():
    keys = [50, 30, 70, 30, 20, 80, 60, 50]
    root = None
    for key in keys:
        root = bst_insert(root, key)
    tree = BinaryTree()
    tree.root = root
    assert tree.inorder() == sorted(keys)
    assert root.data == 50


def test_bst_insert_equal_goes_left():
    root = bst_insert(None, 5)
    bst_insert(root, 5)
    assert root.left.data == 5
    assert root.right is None


def test_node_defaults():
    node = Node(3)
    assert node.left is None and node.right is None
    assert node.data == 3