"""Hypermedia link construction from a static operation-to-URL map."""

from starlette.requests import Request

from src.catalog.api.http.schemas.product import Link

PRODUCTS_PATH = "/api/products"

LINK_TEMPLATES: dict[str, str] = {
    "find_all": PRODUCTS_PATH,
    "find_by_id": PRODUCTS_PATH + "/{product_id}",
}


def link_to(request: Request, operation: str, rel: str, **params: object) -> Link:
    """Build an absolute link to ``operation`` relative to the request's base URL.

    Raises:
        KeyError: ``operation`` has no template, or a template parameter is missing.
    """
    path = LINK_TEMPLATES[operation].format(**params)
    return Link(rel=rel, href=str(request.base_url).rstrip("/") + path)
