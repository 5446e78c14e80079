"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.ports.product_port import ProductPersistencePort
from src.catalog.core.services import DbSessionService, ProductUseCases
from src.catalog.entities.service.product.repository import ProductRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a request-scoped session, closed once the response is sent."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_port(session: Session = Depends(get_db_session)) -> ProductPersistencePort:
    return ProductRepository(session)


def get_product_use_cases(
    product_port: ProductPersistencePort = Depends(get_product_port),
) -> ProductUseCases:
    return ProductUseCases.from_port(product_port)
