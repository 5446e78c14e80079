"""Unit tests for the product use-case services."""

import math
from unittest.mock import Mock

import pytest

from src.catalog.core.exceptions import InvalidPageRequestError, NotFoundError
from src.catalog.core.ports.product_port import ProductPersistencePort
from src.catalog.core.services import (
    DeleteProductByIdService,
    FindProductByIdService,
    ProductUseCases,
)
from src.catalog.entities.service.product.entity import Product
from tests.fixtures.dummies import InMemoryProductPort


class TestCreateProduct:
    def test_create_assigns_id_and_keeps_fields(self, use_cases: ProductUseCases):
        """Created products get an id and keep name and description."""
        created = use_cases.create.create_product(Product(name="Pen", description="blue"))

        assert created.id == 1
        assert created.name == "Pen"
        assert created.description == "blue"

    def test_create_then_find_returns_equal_product(self, use_cases: ProductUseCases):
        created = use_cases.create.create_product(Product(name="Pen", description="blue"))

        found = use_cases.find_by_id.find_by_id(created.id)

        assert found == created
        assert found.id is not None

    def test_create_ignores_caller_supplied_id(
        self, use_cases: ProductUseCases, product_port: InMemoryProductPort
    ):
        """Identity always comes from the store."""
        created = use_cases.create.create_product(Product(id=99, name="Pen"))

        assert created.id == 1
        assert product_port.calls == [("save", None)]

    def test_duplicate_names_are_allowed(self, use_cases: ProductUseCases):
        first = use_cases.create.create_product(Product(name="Pen"))
        second = use_cases.create.create_product(Product(name="Pen"))

        assert first.id != second.id
        assert len(use_cases.find_all.find_all()) == 2


class TestFindProducts:
    def test_find_by_id_missing_raises_not_found(self, use_cases: ProductUseCases):
        with pytest.raises(NotFoundError) as exc_info:
            use_cases.find_by_id.find_by_id(42)

        assert exc_info.value.entity_id == 42
        assert "42" in str(exc_info.value)

    def test_find_all_empty_store(self, use_cases: ProductUseCases):
        assert use_cases.find_all.find_all() == []

    def test_find_all_returns_snapshot(self, use_cases: ProductUseCases):
        use_cases.create.create_product(Product(name="Pen"))
        snapshot = use_cases.find_all.find_all()

        use_cases.create.create_product(Product(name="Pencil"))

        assert [p.name for p in snapshot] == ["Pen"]


class TestUpdateProduct:
    def test_update_replaces_all_fields_but_id(self, use_cases: ProductUseCases):
        created = use_cases.create.create_product(Product(name="Pen", description="blue"))

        updated = use_cases.update.update(
            created.id, Product(id=500, name="Marker", description="red")
        )

        assert updated.id == created.id
        assert updated.name == "Marker"
        assert updated.description == "red"
        assert use_cases.find_by_id.find_by_id(created.id) == updated

    def test_update_is_full_replace_not_patch(self, use_cases: ProductUseCases):
        """Omitted description is cleared, not preserved."""
        created = use_cases.create.create_product(Product(name="Pen", description="blue"))

        updated = use_cases.update.update(created.id, Product(name="Pen"))

        assert updated.description is None

    def test_update_missing_raises_not_found_without_saving(
        self, use_cases: ProductUseCases, product_port: InMemoryProductPort
    ):
        with pytest.raises(NotFoundError):
            use_cases.update.update(7, Product(name="Ghost"))

        assert ("save", 7) not in product_port.calls
        assert product_port.calls == [("find_by_id", 7)]


class TestDeleteProduct:
    def test_delete_removes_product(self, use_cases: ProductUseCases):
        created = use_cases.create.create_product(Product(name="Pen"))

        use_cases.delete_by_id.delete_by_id(created.id)

        with pytest.raises(NotFoundError):
            use_cases.find_by_id.find_by_id(created.id)

    def test_delete_missing_raises_before_touching_store(
        self, use_cases: ProductUseCases, product_port: InMemoryProductPort
    ):
        with pytest.raises(NotFoundError):
            use_cases.delete_by_id.delete_by_id(3)

        assert product_port.calls == [("find_by_id", 3)]

    def test_delete_checks_existence_through_find_service(self):
        """Deletion goes through the find-by-id use case before deleting."""
        port = Mock(spec=ProductPersistencePort)
        finder = Mock(spec=FindProductByIdService)
        finder.find_by_id.return_value = Product(id=5, name="Pen")

        DeleteProductByIdService(port, finder).delete_by_id(5)

        finder.find_by_id.assert_called_once_with(5)
        port.delete_by_id.assert_called_once_with(5)

    def test_delete_propagates_not_found_from_finder(self):
        port = Mock(spec=ProductPersistencePort)
        finder = Mock(spec=FindProductByIdService)
        finder.find_by_id.side_effect = NotFoundError("Product", 5)

        with pytest.raises(NotFoundError):
            DeleteProductByIdService(port, finder).delete_by_id(5)

        port.delete_by_id.assert_not_called()


class TestPagedSearch:
    @pytest.mark.parametrize("page_index,page_size", [(-1, 5), (0, 0), (0, -3)])
    def test_invalid_page_request_rejected(
        self,
        use_cases: ProductUseCases,
        product_port: InMemoryProductPort,
        page_index: int,
        page_size: int,
    ):
        with pytest.raises(InvalidPageRequestError):
            use_cases.paged_search.paged_search(page_index, page_size)

        assert product_port.calls == []

    @pytest.mark.parametrize("total,page_size", [(0, 1), (1, 5), (5, 5), (6, 5), (11, 3)])
    def test_page_size_and_total_pages_invariants(self, total: int, page_size: int):
        port = InMemoryProductPort([Product(name=f"p{i}") for i in range(total)])
        use_cases = ProductUseCases.from_port(port)

        for page_index in range(math.ceil(total / page_size) + 1):
            page = use_cases.paged_search.paged_search(page_index, page_size)

            assert len(page.products) <= page_size
            assert page.total_elements == total
            assert page.total_pages == math.ceil(total / page_size)

    def test_page_past_the_end_is_empty(self):
        port = InMemoryProductPort([Product(name="Pen")])

        page = ProductUseCases.from_port(port).paged_search.paged_search(3, 5)

        assert page.products == []
        assert page.total_elements == 1
        assert page.total_pages == 1

    def test_each_call_requeries_the_store(
        self, use_cases: ProductUseCases, product_port: InMemoryProductPort
    ):
        use_cases.paged_search.paged_search(0, 5)
        use_cases.paged_search.paged_search(0, 5)

        assert product_port.calls.count(("find_page", (0, 5))) == 2


def test_full_lifecycle_scenario(use_cases: ProductUseCases):
    """Create, list, page, update and delete a single product."""
    created = use_cases.create.create_product(Product(name="Pen", description="blue"))
    assert created == Product(id=1, name="Pen", description="blue")

    assert use_cases.find_all.find_all() == [created]

    page = use_cases.paged_search.paged_search(0, 5)
    assert page.products == [created]
    assert page.total_elements == 1
    assert page.total_pages == 1

    updated = use_cases.update.update(1, Product(name="Pen", description="red"))
    assert updated == Product(id=1, name="Pen", description="red")

    use_cases.delete_by_id.delete_by_id(1)
    with pytest.raises(NotFoundError):
        use_cases.find_by_id.find_by_id(1)
