"""Read-only page projection returned by paged product queries."""

import math

from pydantic import BaseModel, ConfigDict, Field

from src.catalog.entities.service.product.entity import Product


class ProductPage(BaseModel):
    """One page of products plus totals across all pages."""

    model_config = ConfigDict(frozen=True)

    products: list[Product] = Field(default_factory=list)
    total_elements: int = Field(ge=0, description="Number of products across all pages")
    total_pages: int = Field(ge=0, description="ceil(total_elements / page_size)")

    @classmethod
    def build(
        cls, products: list[Product], total_elements: int, page_size: int
    ) -> "ProductPage":
        """Build a page, deriving ``total_pages`` from the element count."""
        return cls(
            products=products,
            total_elements=total_elements,
            total_pages=math.ceil(total_elements / page_size),
        )
