"""SQL adapter for the product persistence port."""

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, select

from src.catalog.core.exceptions import NotFoundError
from src.catalog.core.models.product_page import ProductPage
from src.catalog.core.ports.product_port import ProductPersistencePort
from src.catalog.entities.service.product.entity import Product
from src.catalog.entities.service.product.table import ProductTable

# SQLite INTEGER and most SQL BIGINT columns are signed 64-bit.
_MAX_SQL_INT = 2**63


class ProductRepository(ProductPersistencePort):
    """Data-access layer for products backed by a SQLModel session.

    Every write commits immediately, so each port call is one atomic store
    operation.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def _get_row(self, product_id: int) -> ProductTable:
        if not -_MAX_SQL_INT <= product_id < _MAX_SQL_INT:
            raise NotFoundError("Product", product_id)
        row = self._session.get(ProductTable, product_id)
        if row is None:
            raise NotFoundError("Product", product_id)
        return row

    def find_by_id(self, product_id: int) -> Product:
        row = self._get_row(product_id)
        return Product.model_validate(row, from_attributes=True)

    def find_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(ProductTable.id)
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def find_page(self, page_index: int, page_size: int) -> ProductPage:
        total_elements = self._session.exec(
            select(func.count()).select_from(ProductTable)
        ).one()
        offset = page_index * page_size
        if offset >= _MAX_SQL_INT:
            return ProductPage.build(
                products=[], total_elements=total_elements, page_size=page_size
            )
        statement = (
            select(ProductTable)
            .order_by(ProductTable.id)
            .offset(offset)
            .limit(page_size)
        )
        rows = self._session.exec(statement).all()
        return ProductPage.build(
            products=[Product.model_validate(row, from_attributes=True) for row in rows],
            total_elements=total_elements,
            page_size=page_size,
        )

    def save(self, product: Product) -> Product:
        if product.id is None:
            row = ProductTable(name=product.name, description=product.description)
            self._session.add(row)
        else:
            row = self._session.get(ProductTable, product.id)
            if row is None:
                row = ProductTable(id=product.id)
                self._session.add(row)
            row.name = product.name
            row.description = product.description

        self._session.commit()
        self._session.refresh(row)
        logger.debug("Saved product {}", row.id)
        return Product.model_validate(row, from_attributes=True)

    def delete_by_id(self, product_id: int) -> None:
        row = self._get_row(product_id)
        self._session.delete(row)
        self._session.commit()
        logger.debug("Deleted product {}", product_id)
