"""Data layer tests.

Exercises the SQL product repository against in-memory SQLite:
- Product table persistence and id assignment
- Persistence port contract (find, page, save, delete)
- Not-found signalling for reads and deletes
"""

import math

import pytest
from sqlmodel import Session, select

from src.catalog.core.exceptions import NotFoundError
from src.catalog.entities.service.product import Product, ProductTable
from src.catalog.entities.service.product.repository import ProductRepository


def _seed(repository: ProductRepository, count: int) -> list[Product]:
    return [
        repository.save(Product(name=f"Product {i}", description=f"#{i}"))
        for i in range(count)
    ]


class TestProductTable:
    def test_table_name(self):
        assert ProductTable.__tablename__ == "product"

    def test_row_round_trip(self, session: Session):
        row = ProductTable(name="Pen", description="blue")
        session.add(row)
        session.commit()

        stored = session.exec(select(ProductTable)).one()

        assert stored.id == 1
        assert stored.name == "Pen"
        assert stored.description == "blue"


class TestProductRepository:
    def test_save_inserts_and_assigns_sequential_ids(self, repository: ProductRepository):
        first = repository.save(Product(name="Pen", description="blue"))
        second = repository.save(Product(name="Pencil"))

        assert first.id == 1
        assert second.id == 2
        assert second.description is None

    def test_find_by_id(self, repository: ProductRepository):
        created = repository.save(Product(name="Pen", description="blue"))

        found = repository.find_by_id(created.id)

        assert found == created
        assert isinstance(found, Product)

    def test_find_by_id_missing(self, repository: ProductRepository):
        with pytest.raises(NotFoundError):
            repository.find_by_id(404)

    def test_save_with_id_replaces_record(self, repository: ProductRepository, session: Session):
        created = repository.save(Product(name="Pen", description="blue"))

        repository.save(Product(id=created.id, name="Pen", description=None))

        rows = session.exec(select(ProductTable)).all()
        assert len(rows) == 1
        assert rows[0].description is None

    def test_find_all_ordered_by_id(self, repository: ProductRepository):
        created = _seed(repository, 3)

        assert repository.find_all() == created

    def test_find_all_empty(self, repository: ProductRepository):
        assert repository.find_all() == []

    @pytest.mark.parametrize("total,page_size", [(0, 5), (1, 5), (7, 3), (9, 3)])
    def test_find_page_contract(self, repository: ProductRepository, total: int, page_size: int):
        created = _seed(repository, total)
        pages = max(1, math.ceil(total / page_size))

        collected = []
        for page_index in range(pages):
            page = repository.find_page(page_index, page_size)
            assert len(page.products) <= page_size
            assert page.total_elements == total
            assert page.total_pages == math.ceil(total / page_size)
            collected.extend(page.products)

        assert collected == created

    def test_find_page_beyond_last(self, repository: ProductRepository):
        _seed(repository, 2)

        page = repository.find_page(5, 2)

        assert page.products == []
        assert page.total_elements == 2
        assert page.total_pages == 1

    def test_delete_by_id(self, repository: ProductRepository):
        created = repository.save(Product(name="Pen"))

        repository.delete_by_id(created.id)

        with pytest.raises(NotFoundError):
            repository.find_by_id(created.id)

    def test_delete_missing_is_an_error(self, repository: ProductRepository):
        with pytest.raises(NotFoundError):
            repository.delete_by_id(1)

    @pytest.mark.parametrize("product_id", [2**63, 2**70, -(2**63) - 1])
    def test_out_of_range_id_is_not_found(self, repository: ProductRepository, product_id: int):
        with pytest.raises(NotFoundError):
            repository.find_by_id(product_id)
        with pytest.raises(NotFoundError):
            repository.delete_by_id(product_id)

    def test_find_page_offset_beyond_sql_integer(self, repository: ProductRepository):
        _seed(repository, 3)

        page = repository.find_page(2**62, 4)

        assert page.products == []
        assert page.total_elements == 3
        assert page.total_pages == 1
