import random

import pytest

from menagerie.binary_tree import BinaryTree, TreeNode, make_node

PLANETS_SORTED = ["Jupiter", "Mars", "Mercury", "Saturn", "Uranus", "Venus"]


def leaf(element):
    return make_node(BinaryTree(), element, BinaryTree())


def test_hand_building_tree_of_planets():
    mars_tree = make_node(leaf("Jupiter"), "Mars", leaf("Mercury"))
    uranus_tree = make_node(BinaryTree(), "Uranus", leaf("Venus"))
    tree = make_node(mars_tree, "Saturn", uranus_tree)
    assert tree.walk() == PLANETS_SORTED


def test_hand_building_with_tree_node():
    tree = BinaryTree(TreeNode("b", leaf("a"), leaf("c")))
    assert tree.walk() == ["a", "b", "c"]


def test_add_method_1():
    tree = BinaryTree()
    for planet in ["Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Uranus"]:
        tree.add(planet)
    assert tree.walk() == PLANETS_SORTED


def test_add_method_2():
    tree = BinaryTree()
    tree.add("Mercury")
    tree.add("Venus")
    for planet in ["Mars", "Jupiter", "Saturn", "Uranus"]:
        tree.add(planet)
    assert tree.walk() == PLANETS_SORTED


def test_add_duplicates_goes_left():
    tree = BinaryTree()
    for value in [5, 3, 5, 7, 5]:
        tree.add(value)
    assert tree.walk() == [3, 5, 5, 5, 7]
    assert tree.node.left.node.element == 3
    assert tree.node.right.node.element == 7


def small_tree():
    subtree_l = leaf("mecha")
    subtree_r = make_node(leaf("droid"), "robot", BinaryTree())
    return make_node(subtree_l, "Jaeger", subtree_r)


def test_external_iterator():
    tree = small_tree()
    assert [kind for kind in tree] == ["mecha", "Jaeger", "droid", "robot"]
    # Iterating twice gives the same result.
    assert list(tree) == ["mecha", "Jaeger", "droid", "robot"]


def test_iterator_map():
    tree = small_tree()
    assert [f"mega-{name}" for name in tree] == [
        "mega-mecha",
        "mega-Jaeger",
        "mega-droid",
        "mega-robot",
    ]


def test_iterator_next_until_exhausted():
    iterator = iter(small_tree())
    assert next(iterator) == "mecha"
    assert next(iterator) == "Jaeger"
    assert next(iterator) == "droid"
    assert next(iterator) == "robot"
    with pytest.raises(StopIteration):
        next(iterator)


def test_empty_tree():
    tree = BinaryTree()
    assert not tree
    assert tree.walk() == []
    tree.add(1)
    assert bool(tree) is True


def _make_random_tree(p, rng):
    counter = [0]

    def make(prob):
        if rng.random() > prob:
            return BinaryTree()
        left = make(prob * prob)
        element = counter[0]
        counter[0] += 1
        right = make(prob * prob)
        return make_node(left, element, right)

    return make(p), counter[0]


def test_fuzz():
    rng = random.Random(12345)
    for _ in range(100):
        tree, count = _make_random_tree(0.9999, rng)
        assert list(tree) == list(range(count))


def test_add_many_sorted_values_is_in_order():
    tree = BinaryTree()
    for value in range(3000):
        tree.add(value)
    assert tree.walk() == list(range(3000))