"""Domain errors raised by the use-case layer and its persistence port."""

from typing import Any


class CatalogError(Exception):
    """Base class for errors the HTTP layer knows how to translate."""


class NotFoundError(CatalogError):
    """No record exists with the requested identifier."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class ValidationError(CatalogError):
    """Caller-supplied input violates a domain constraint."""


class InvalidPageRequestError(ValidationError):
    def __init__(self, page_index: int, page_size: int):
        self.page_index = page_index
        self.page_size = page_size
        super().__init__(
            f"Invalid page request: page={page_index} (must be >= 0), "
            f"pageSize={page_size} (must be >= 1)"
        )
