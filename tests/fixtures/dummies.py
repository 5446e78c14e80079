from __future__ import annotations

import math

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.models.product_page import ProductPage
from src.catalog.core.ports.product_port import ProductPersistencePort
from src.catalog.entities.service.product.entity import Product


class InMemoryProductPort(ProductPersistencePort):
    """Dict-backed port that records every call it receives."""

    def __init__(self, products: list[Product] | None = None):
        self._rows: dict[int, Product] = {}
        self._next_id = 1
        self.calls: list[tuple[str, object]] = []
        for product in products or []:
            self.save(product)
        self.calls.clear()

    def find_by_id(self, product_id: int) -> Product:
        self.calls.append(("find_by_id", product_id))
        if product_id not in self._rows:
            raise NotFoundError("Product", product_id)
        return self._rows[product_id].model_copy()

    def find_all(self) -> list[Product]:
        self.calls.append(("find_all", None))
        return [p.model_copy() for _, p in sorted(self._rows.items())]

    def find_page(self, page_index: int, page_size: int) -> ProductPage:
        self.calls.append(("find_page", (page_index, page_size)))
        ordered = [p.model_copy() for _, p in sorted(self._rows.items())]
        start = page_index * page_size
        return ProductPage(
            products=ordered[start:start + page_size],
            total_elements=len(ordered),
            total_pages=math.ceil(len(ordered) / page_size),
        )

    def save(self, product: Product) -> Product:
        self.calls.append(("save", product.id))
        stored = product.model_copy()
        if stored.id is None:
            stored.id = self._next_id
            self._next_id += 1
        self._rows[stored.id] = stored
        return stored.model_copy()

    def delete_by_id(self, product_id: int) -> None:
        self.calls.append(("delete_by_id", product_id))
        if product_id not in self._rows:
            raise NotFoundError("Product", product_id)
        del self._rows[product_id]
