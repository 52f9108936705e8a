"""CSV file storage of products, one product per line."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .product import Product


class ProductFileHandler:
    """Reads and writes products in a CSV file."""

    def __init__(self, filename: str | os.PathLike[str]) -> None:
        self.filename = Path(filename)

    def _overwrite(self, products: list[Product]) -> None:
        try:
            with self.filename.open("w", encoding="utf-8") as file:
                file.writelines(product.to_csv_line() for product in products)
        except OSError:
            print("Failed to open file.", file=sys.stderr)

    def create(self, product: Product) -> bool:
        """Append a product; return False when the file cannot be opened."""
        try:
            with self.filename.open("a", encoding="utf-8") as file:
                file.write(product.to_csv_line())
        except OSError:
            return False
        return True

    def get(self) -> list[Product]:
        """Return every well-formed product line in the file."""
        try:
            with self.filename.open("r", encoding="utf-8", newline="") as file:
                lines = file.read().split("\n")
        except OSError:
            print("Failed to open file.", file=sys.stderr)
            return []
        products = (Product.from_csv_line(line) for line in lines)
        return [product for product in products if product is not None]

    def remove(self, code: str) -> bool:
        """Drop every product with this code; return whether any was found."""
        products = self.get()
        kept = [product for product in products if product.code != code]
        if len(kept) == len(products):
            return False
        self._overwrite(kept)
        return True