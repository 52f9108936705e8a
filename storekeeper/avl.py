"""A self-balancing search tree of products keyed by name."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .product import Product


@dataclass
class Node:
    """One tree node holding a product."""

    product: Product
    left: Node | None = None
    right: Node | None = None
    height: int = 1


def _height(node: Node | None) -> int:
    return node.height if node else 0


def _balance(node: Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _update_height(node: Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: Node) -> Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: Node) -> Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _insert(node: Node | None, product: Product) -> Node:
    if node is None:
        return Node(product)

    name = product.name
    if name < node.product.name:
        node.left = _insert(node.left, product)
    elif name > node.product.name:
        node.right = _insert(node.right, product)
    else:
        return node

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and name < node.left.product.name:
        return _rotate_right(node)
    if balance < -1 and name > node.right.product.name:
        return _rotate_left(node)
    if balance > 1 and name > node.left.product.name:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and name < node.right.product.name:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: Node) -> Node:
    while node.left:
        node = node.left
    return node


def _delete(node: Node | None, name: str) -> Node | None:
    if node is None:
        return None

    if name < node.product.name:
        node.left = _delete(node.left, name)
    elif name > node.product.name:
        node.right = _delete(node.right, name)
    elif node.left is None or node.right is None:
        child = node.left or node.right
        if child is None:
            return None
        node = child
    else:
        successor = _min_node(node.right)
        node.product = successor.product
        node.right = _delete(node.right, successor.product.name)

    _update_height(node)
    balance = _balance(node)

    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _walk_in(node: Node | None) -> Iterator[Product]:
    if node:
        yield from _walk_in(node.left)
        yield node.product
        yield from _walk_in(node.right)


def _walk_pre(node: Node | None) -> Iterator[Product]:
    if node:
        yield node.product
        yield from _walk_pre(node.left)
        yield from _walk_pre(node.right)


def _walk_post(node: Node | None) -> Iterator[Product]:
    if node:
        yield from _walk_post(node.left)
        yield from _walk_post(node.right)
        yield node.product


class AvlTree:
    """Products ordered by name; a name already present is not inserted again."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, product: Product) -> None:
        self.root = _insert(self.root, product)

    def delete(self, name: str) -> None:
        self.root = _delete(self.root, name)

    def search(self, name: str) -> Product | None:
        node = self.root
        while node and node.product.name != name:
            node = node.left if name < node.product.name else node.right
        return node.product if node else None

    def inorder(self) -> list[Product]:
        return list(_walk_in(self.root))

    def preorder(self) -> list[Product]:
        return list(_walk_pre(self.root))

    def postorder(self) -> list[Product]:
        return list(_walk_post(self.root))

    def search_prefix(self, prefix: str) -> list[Product]:
        """Products whose name starts with prefix, in pre-order."""
        return [p for p in _walk_pre(self.root) if p.name.startswith(prefix)]

    def __iter__(self) -> Iterator[Product]:
        return _walk_in(self.root)