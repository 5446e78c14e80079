"""Request and response bodies for the product endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.catalog.core.models.product_page import ProductPage
from src.catalog.entities.service.product.entity import Product


class Link(BaseModel):
    """Hypermedia link attached to a response."""

    rel: str = Field(description="Relation name")
    href: str = Field(description="Absolute URI")


class ProductRequest(BaseModel):
    """Body accepted by create and update."""

    name: str = Field(min_length=1, pattern=r"\S", description="Non-blank name")
    description: str | None = Field(default=None, description="Optional description")

    def to_domain(self) -> Product:
        return Product(name=self.name, description=self.description)


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str | None = None
    links: list[Link] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, product: Product, links: list[Link] | None = None) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            links=links or [],
        )


class ProductPageResponse(BaseModel):
    """One page of products; totals are serialized in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    products: list[ProductResponse] = Field(default_factory=list)
    total_elements: int
    total_pages: int

    @classmethod
    def from_domain(cls, page: ProductPage, products: list[ProductResponse]) -> "ProductPageResponse":
        return cls(
            products=products,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
        )
