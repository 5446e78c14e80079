"""Entity package: Product.

The SQL adapter lives in ``.repository`` and is imported from there directly,
since it depends on the core port that itself refers to ``Product``.
"""

from .entity import Product
from .table import ProductTable

__all__ = ["Product", "ProductTable"]
