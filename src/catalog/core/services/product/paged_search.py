from src.catalog.core.exceptions import InvalidPageRequestError
from src.catalog.core.models.product_page import ProductPage
from src.catalog.core.ports.product_port import ProductPersistencePort


class PagedSearchService:
    def __init__(self, product_port: ProductPersistencePort):
        self._product_port = product_port

    def paged_search(self, page_index: int, page_size: int) -> ProductPage:
        """Return page ``page_index`` (0-based) holding at most ``page_size`` products.

        Raises:
            InvalidPageRequestError: ``page_index`` is negative or ``page_size`` is below 1.
        """
        if page_index < 0 or page_size < 1:
            raise InvalidPageRequestError(page_index, page_size)
        return self._product_port.find_page(page_index, page_size)
