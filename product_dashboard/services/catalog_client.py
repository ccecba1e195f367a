# product_dashboard/services/catalog_client.py

"""HTTP/JSON client for the remote product catalog."""

import logging
import math
import time
from typing import Any

from curl_cffi import requests as curl_requests

from product_dashboard.config.settings import Settings
from product_dashboard.models.product import (
    Product,
    ProductDraft,
    ProductId,
    Rating,
)

logger = logging.getLogger("product_dashboard.catalog")


class CatalogRequestError(Exception):
    """A catalog call failed: transport error, HTTP error or bad payload."""

    def __init__(
        self,
        method: str,
        path: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"{method} {path} failed: {reason}")
        self.method = method
        self.path = path
        self.status_code = status_code


def parse_rating(data: Any) -> Rating:
    """Build a Rating from ``{"rate": .., "count": ..}``, clamping rate to 0-5.

    A non-finite rate counts as unrated.
    """
    if not isinstance(data, dict):
        return Rating()
    rate = float(data.get("rate") or 0.0)
    if not math.isfinite(rate):
        rate = 0.0
    count = int(data.get("count") or 0)
    return Rating(rate=min(max(rate, 0.0), 5.0), count=max(count, 0))


def _is_valid_id(value: Any) -> bool:
    return isinstance(value, (int, str)) and not isinstance(value, bool)


def parse_product(data: dict[str, Any]) -> Product:
    """Build a Product from one catalog JSON object.

    Raises KeyError, TypeError or ValueError on malformed input.
    """
    product_id = data["id"]
    if not _is_valid_id(product_id):
        raise TypeError(f"product id must be int or str, got {product_id!r}")
    return Product(
        id=product_id,
        title=str(data["title"]),
        price=float(data["price"]),
        description=str(data.get("description") or ""),
        category=str(data.get("category") or ""),
        image=str(data.get("image") or ""),
        rating=parse_rating(data.get("rating")),
    )


def is_valid_product(product: Product) -> bool:
    """A product needs a positive, finite price and a non-blank title."""
    return (
        math.isfinite(product.price)
        and product.price > 0
        and bool(product.title.strip())
    )


class CatalogClient:
    """Blocking CRUD client for the remote catalog.

    Every method raises :class:`CatalogRequestError` on failure and
    performs exactly one request; retrying is left to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: Any = None,
    ) -> None:
        self.settings = Settings()
        self.base_url = (
            base_url or self.settings.CATALOG_BASE_URL
        ).rstrip("/")
        self.session = (
            session if session is not None else curl_requests.Session()
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT
        self._last_local_id: int = 0

    # ── Transport ────────────────────────────────────────

    def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (or None)."""
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(
                method,
                url,
                headers=self.settings.DEFAULT_HEADERS,
                json=payload,
                timeout=self._request_timeout,
            )
        except curl_requests.RequestsError as exc:
            logger.warning("%s %s transport error: %s", method, url, exc)
            raise CatalogRequestError(method, path, str(exc)) from exc

        if not 200 <= resp.status_code < 300:
            logger.warning("%s %s returned HTTP %d", method, url, resp.status_code)
            raise CatalogRequestError(
                method,
                path,
                f"HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            logger.warning("%s %s returned invalid JSON", method, url)
            raise CatalogRequestError(
                method, path, "invalid JSON body", resp.status_code
            ) from exc

    def _parse_list(self, path: str, data: Any) -> list[Product]:
        """Parse a product array, dropping malformed and duplicate entries."""
        if not isinstance(data, list):
            raise CatalogRequestError("GET", path, "expected a JSON array")

        products: list[Product] = []
        seen_ids: set[ProductId] = set()
        dropped = 0
        for item in data:
            try:
                product = parse_product(item)
            except (KeyError, TypeError, ValueError):
                logger.debug("Dropped malformed catalog entry: %r", item)
                dropped += 1
                continue
            if not is_valid_product(product):
                logger.debug("Dropped invalid product %s", product.id)
                dropped += 1
                continue
            if product.id in seen_ids:
                logger.debug("Dropped duplicate product id %s", product.id)
                dropped += 1
                continue
            seen_ids.add(product.id)
            products.append(product)

        if dropped:
            logger.info("Skipped %d invalid catalog entries", dropped)
        return products

    def _next_local_id(self) -> int:
        """Millisecond timestamp id, strictly increasing per client."""
        candidate = int(time.time() * 1000)
        self._last_local_id = max(candidate, self._last_local_id + 1)
        return self._last_local_id

    # ── Catalog operations ───────────────────────────────

    def fetch_all(self) -> list[Product]:
        """Return every product in the catalog."""
        path = "/products"
        products = self._parse_list(path, self._request("GET", path))
        logger.info("Fetched %d products", len(products))
        return products

    def fetch_categories(self) -> list[str]:
        """Return the catalog's category names."""
        path = "/products/categories"
        data = self._request("GET", path)
        if not isinstance(data, list):
            raise CatalogRequestError("GET", path, "expected a JSON array")
        return [str(c) for c in data]

    def create(self, draft: ProductDraft) -> Product:
        """Create a product and return it with its assigned id."""
        path = "/products"
        data = self._request("POST", path, draft.to_payload())

        if self.settings.ASSIGN_LOCAL_IDS:
            product_id: ProductId = self._next_local_id()
        elif isinstance(data, dict) and _is_valid_id(data.get("id")):
            product_id = data["id"]
        else:
            raise CatalogRequestError("POST", path, "response has no id")

        product = Product(
            id=product_id,
            title=draft.title,
            price=draft.price,
            description=draft.description,
            category=draft.category,
            image=draft.image,
            rating=draft.rating,
        )
        logger.info("Created product %s (%s)", product.id, product.title)
        return product

    def update(self, product_id: ProductId, draft: ProductDraft) -> Product:
        """Replace a product; fields the server omits keep the draft values."""
        path = f"/products/{product_id}"
        data = self._request("PUT", path, draft.to_payload())

        merged: dict[str, Any] = draft.to_payload()
        if isinstance(data, dict):
            merged.update(data)
        merged["id"] = product_id
        try:
            product = parse_product(merged)
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogRequestError(
                "PUT", path, "malformed product in response"
            ) from exc
        if not is_valid_product(product):
            logger.warning("PUT %s returned an invalid product", path)
            raise CatalogRequestError("PUT", path, "invalid product in response")
        logger.info("Updated product %s", product_id)
        return product

    def delete(self, product_id: ProductId) -> None:
        """Delete a product."""
        self._request("DELETE", f"/products/{product_id}")
        logger.info("Deleted product %s", product_id)
