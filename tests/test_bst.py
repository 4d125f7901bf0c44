import random

from algokit.bst import BinarySearchTree

SOURCE_KEYS = [50, 30, 20, 40, 70, 60, 80]


def test_source_example_inorder():
    tree = BinarySearchTree(SOURCE_KEYS)
    assert tree.inorder() == sorted(SOURCE_KEYS)


def test_iter_matches_inorder():
    tree = BinarySearchTree(SOURCE_KEYS)
    assert list(tree) == tree.inorder()


def test_duplicates_ignored():
    tree = BinarySearchTree([5, 3, 5, 3, 9])
    assert len(tree) == 3
    assert tree.inorder() == [3, 5, 9]


def test_contains():
    tree = BinarySearchTree(SOURCE_KEYS)
    for key in SOURCE_KEYS:
        assert key in tree
    assert 55 not in tree
    assert 0 not in tree


def test_empty_tree():
    tree = BinarySearchTree()
    assert len(tree) == 0
    assert tree.inorder() == []
    assert 1 not in tree


def test_insert_incrementally():
    tree = BinarySearchTree()
    for key in SOURCE_KEYS:
        tree.insert(key)
    assert len(tree) == len(SOURCE_KEYS)
    assert tree.inorder() == sorted(SOURCE_KEYS)


def test_random_keys_sorted_and_unique():
    rng = random.Random(3)
    keys = [rng.randint(0, 100) for _ in range(200)]
    tree = BinarySearchTree(keys)
    assert tree.inorder() == sorted(set(keys))
    assert len(tree) == len(set(keys))


def test_sorted_input_deep_tree():
    keys = list(range(3000))
    tree = BinarySearchTree(keys)
    assert tree.inorder() == keys
    assert 2999 in tree