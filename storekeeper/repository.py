"""Product storage backed by CSV files, a code index and name-ordered trees."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from .avl import AvlTree
from .constraints import Constraint, ErrorBag
from .product import Product
from .storage import ProductFileHandler

DATA_FILE = "data.csv"
REMOVED_FILE = "remove.csv"


class ProductRepository(ABC):
    """Access to the store's products and the history of removed ones."""

    @abstractmethod
    def insert(self, product: Product) -> bool:
        """Add a product and persist it."""

    @abstractmethod
    def get_all(self) -> list[Product]:
        """Every current product."""

    @abstractmethod
    def get_by_code(self, code: str) -> Product | None:
        """The product with this code, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> list[Product]:
        """Products whose name starts with the given text."""

    @abstractmethod
    def get_all_sort_name(self, ascending: bool = True) -> list[Product]:
        """Products ordered by name."""

    @abstractmethod
    def remove(self, code: str) -> bool:
        """Remove the product with this code; return whether it existed."""

    @abstractmethod
    def history(self) -> AvlTree:
        """The tree of removed products."""


class ProductRepositoryImpl(ProductRepository):
    """Repository keeping products in a CSV file and removed ones in another."""

    def __init__(
        self,
        data_path: str | os.PathLike[str] = DATA_FILE,
        removed_path: str | os.PathLike[str] = REMOVED_FILE,
    ) -> None:
        self._product_file = ProductFileHandler(data_path)
        self._removed_file = ProductFileHandler(removed_path)
        self._by_code: dict[str, Product] = {}
        self._by_name = AvlTree()
        self._history = AvlTree()

        for product in self._product_file.get():
            self._by_code[product.code] = product
            self._by_name.insert(product)

        for product in self._removed_file.get():
            self._history.insert(product)

    def insert(self, product: Product) -> bool:
        self._by_code[product.code] = product
        self._by_name.insert(product)
        self._product_file.create(product)
        return True

    def get_all(self) -> list[Product]:
        return list(self._by_code.values())

    def get_by_code(self, code: str) -> Product | None:
        return self._by_code.get(code)

    def get_by_name(self, name: str) -> list[Product]:
        return self._by_name.search_prefix(name)

    def get_all_sort_name(self, ascending: bool = True) -> list[Product]:
        products = self._by_name.inorder()
        if not ascending:
            products.reverse()
        return products

    def remove(self, code: str) -> bool:
        product = self._by_code.pop(code, None)
        if product is None:
            return False
        self._by_name.delete(product.name)
        self._history.insert(product)
        self._removed_file.create(product)
        self._product_file.remove(code)
        return True

    def history(self) -> AvlTree:
        return self._history


_instance: ProductRepository | None = None


def get_repository() -> ProductRepository:
    """Return the shared repository, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = ProductRepositoryImpl()
    return _instance


class MustUniqueCodeProductConstraint(Constraint):
    """The input must not be the code of an existing product."""

    def __init__(self, repository: ProductRepository | None = None) -> None:
        super().__init__("Code produk sudah digunakan")
        self._repository = repository

    def check(self, target: str, error_bag: ErrorBag) -> bool:
        repository = self._repository or get_repository()
        if repository.get_by_code(target) is not None:
            return self._fail(error_bag)
        return super().check(target, error_bag)