"""Product API router with CRUD and paged search operations."""

from fastapi import APIRouter, Depends, Query, Request, Response, status

from src.catalog.api.http.deps import get_product_use_cases
from src.catalog.api.http.links import PRODUCTS_PATH, link_to
from src.catalog.api.http.schemas.product import (
    ProductPageResponse,
    ProductRequest,
    ProductResponse,
)
from src.catalog.core.services import ProductUseCases
from src.catalog.entities.service.product.entity import Product
from src.catalog.runtime.context import get_config

router = APIRouter(prefix=PRODUCTS_PATH, tags=["product-rest"])

LIST_REL = "product list"


def _with_self_link(request: Request, product: Product) -> ProductResponse:
    return ProductResponse.from_domain(
        product, [link_to(request, "find_by_id", "self", product_id=product.id)]
    )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    description="Create a product",
)
def create_product(
    product_request: ProductRequest,
    request: Request,
    use_cases: ProductUseCases = Depends(get_product_use_cases),
) -> ProductResponse:
    """Create a new product."""
    product = use_cases.create.create_product(product_request.to_domain())
    return ProductResponse.from_domain(product, [link_to(request, "find_all", "self")])


@router.get("", response_model=list[ProductResponse], description="List every product")
def list_products(
    request: Request,
    use_cases: ProductUseCases = Depends(get_product_use_cases),
) -> list[ProductResponse]:
    """List all products."""
    return [_with_self_link(request, product) for product in use_cases.find_all.find_all()]


@router.get("/page", response_model=ProductPageResponse, description="Paged product search")
def find_product_page(
    request: Request,
    page: int = Query(default=0, ge=0),
    page_size: int | None = Query(default=None, alias="pageSize", ge=1),
    use_cases: ProductUseCases = Depends(get_product_use_cases),
) -> ProductPageResponse:
    """Get one page of products."""
    if page_size is None:
        page_size = get_config().pagination.default_page_size
    product_page = use_cases.paged_search.paged_search(page, page_size)
    return ProductPageResponse.from_domain(
        product_page,
        [_with_self_link(request, product) for product in product_page.products],
    )


@router.get("/{product_id}", response_model=ProductResponse, description="Get a product by id")
def get_product(
    product_id: int,
    request: Request,
    use_cases: ProductUseCases = Depends(get_product_use_cases),
) -> ProductResponse:
    """Get a product by ID."""
    product = use_cases.find_by_id.find_by_id(product_id)
    return ProductResponse.from_domain(product, [link_to(request, "find_all", LIST_REL)])


@router.put("/{product_id}", response_model=ProductResponse, description="Update a product")
def update_product(
    product_id: int,
    product_request: ProductRequest,
    request: Request,
    use_cases: ProductUseCases = Depends(get_product_use_cases),
) -> ProductResponse:
    """Replace every field of a product except its id."""
    product = use_cases.update.update(product_id, product_request.to_domain())
    return ProductResponse.from_domain(product, [link_to(request, "find_all", LIST_REL)])


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    description="Delete a product by id",
)
def delete_product(
    product_id: int,
    use_cases: ProductUseCases = Depends(get_product_use_cases),
) -> Response:
    """Delete a product."""
    use_cases.delete_by_id.delete_by_id(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
