"""Ports: abstract interfaces the core depends on."""

from .product_port import ProductPersistencePort

__all__ = ["ProductPersistencePort"]
