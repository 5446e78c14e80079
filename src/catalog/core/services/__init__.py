"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# Product Use Cases
from .product import (
    CreateProductService,
    DeleteProductByIdService,
    FindAllProductsService,
    FindProductByIdService,
    PagedSearchService,
    ProductUseCases,
    UpdateProductService,
)

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Product Use Cases
    "CreateProductService",
    "DeleteProductByIdService",
    "FindAllProductsService",
    "FindProductByIdService",
    "PagedSearchService",
    "ProductUseCases",
    "UpdateProductService",
]
