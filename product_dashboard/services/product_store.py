# product_dashboard/services/product_store.py

"""Authoritative product list kept in sync with the remote catalog."""

import asyncio
import logging
from enum import Enum

from product_dashboard.filters.product_filter import ProductFilter
from product_dashboard.models.filter_criteria import FilterCriteria
from product_dashboard.models.product import (
    Product,
    ProductDraft,
    ProductId,
)
from product_dashboard.services.catalog_client import CatalogClient

logger = logging.getLogger("product_dashboard.store")


class ErrorKind(Enum):
    """Which remote call failed; the value is the user-facing message."""

    FETCH_FAILED = "Failed to fetch products. Please try again."
    CREATE_FAILED = "Failed to add product. Please try again."
    UPDATE_FAILED = "Failed to update product. Please try again."
    DELETE_FAILED = "Failed to delete product. Please try again."

    @property
    def message(self) -> str:
        return self.value


class ProductStore:
    """Holds the product list and its filtered view.

    Mutations go to the catalog first and touch local state only once
    the call has succeeded, replacing both lists in one step. Remote
    failures never escape: they are logged, recorded in
    :attr:`last_error` and reported through the return value.

    The catalog client is blocking, so every call runs in a worker
    thread via :func:`asyncio.to_thread`.
    """

    def __init__(self, client: CatalogClient) -> None:
        self._client = client
        self._products: list[Product] = []
        self._filtered: list[Product] = []
        self._categories: list[str] = []
        self._criteria = FilterCriteria()
        self._loading = False
        self._last_error: ErrorKind | None = None

    # ── Read-only state ──────────────────────────────────

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    @property
    def filtered(self) -> list[Product]:
        return list(self._filtered)

    @property
    def categories(self) -> list[str]:
        return list(self._categories)

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def last_error(self) -> ErrorKind | None:
        return self._last_error

    def find(self, product_id: ProductId) -> Product | None:
        """Return the first product with *product_id*, if any."""
        return next(
            (p for p in self._products if p.id == product_id), None
        )

    def clear_error(self) -> None:
        """Dismiss the last recorded error."""
        self._last_error = None

    # ── Helpers ──────────────────────────────────────────

    def _commit(self, products: list[Product]) -> None:
        """Swap in a new product list and its re-filtered view."""
        self._filtered = ProductFilter.apply(products, self._criteria)
        self._products = products

    @staticmethod
    def _index_of(
        products: list[Product], product_id: ProductId
    ) -> int | None:
        for idx, product in enumerate(products):
            if product.id == product_id:
                return idx
        return None

    # ── Operations ───────────────────────────────────────

    async def load(self) -> None:
        """Fetch products and categories concurrently.

        A category failure is logged and otherwise ignored; a product
        failure records ``FETCH_FAILED`` and keeps the current lists.
        A successful load resets the criteria, so the filtered view
        starts as a full copy of the products.
        """
        self._loading = True
        try:
            products_result, categories_result = await asyncio.gather(
                asyncio.to_thread(self._client.fetch_all),
                asyncio.to_thread(self._client.fetch_categories),
                return_exceptions=True,
            )

            if isinstance(categories_result, BaseException):
                logger.error(
                    "Error fetching categories: %s",
                    categories_result,
                    exc_info=categories_result,
                )
            else:
                self._categories = list(categories_result)

            if isinstance(products_result, BaseException):
                logger.error(
                    "Error fetching products: %s",
                    products_result,
                    exc_info=products_result,
                )
                self._last_error = ErrorKind.FETCH_FAILED
            else:
                products = list(products_result)
                self._criteria = FilterCriteria()
                self._products = products
                self._filtered = list(products)
                self._last_error = None
                logger.info(
                    "Loaded %d products, %d categories",
                    len(products),
                    len(self._categories),
                )
        finally:
            self._loading = False

    async def create(self, draft: ProductDraft) -> bool:
        """Create a product remotely and append it locally."""
        try:
            product = await asyncio.to_thread(self._client.create, draft)
        except Exception as exc:
            logger.error(
                "Error adding product '%s': %s",
                draft.title,
                exc,
                exc_info=True,
            )
            self._last_error = ErrorKind.CREATE_FAILED
            return False

        self._commit([*self._products, product])
        return True

    async def update(
        self, product_id: ProductId, draft: ProductDraft
    ) -> bool:
        """Update a product remotely and replace its local entry.

        Only the first entry with a matching id is replaced; if there is
        none the local list is left as it is.
        """
        try:
            updated = await asyncio.to_thread(
                self._client.update, product_id, draft
            )
        except Exception as exc:
            logger.error(
                "Error updating product %s: %s",
                product_id,
                exc,
                exc_info=True,
            )
            self._last_error = ErrorKind.UPDATE_FAILED
            return False

        products = list(self._products)
        idx = self._index_of(products, product_id)
        if idx is None:
            logger.warning(
                "Updated product %s is not in the local list", product_id
            )
        else:
            products[idx] = updated
        self._commit(products)
        return True

    async def delete(self, product_id: ProductId) -> bool:
        """Delete a product remotely and drop its local entry.

        Callers are expected to have confirmed the deletion already.
        """
        try:
            await asyncio.to_thread(self._client.delete, product_id)
        except Exception as exc:
            logger.error(
                "Error deleting product %s: %s",
                product_id,
                exc,
                exc_info=True,
            )
            self._last_error = ErrorKind.DELETE_FAILED
            return False

        products = list(self._products)
        idx = self._index_of(products, product_id)
        if idx is not None:
            del products[idx]
        self._commit(products)
        return True

    def apply_filter(self, criteria: FilterCriteria) -> None:
        """Recompute the filtered view locally; never calls the catalog."""
        self._criteria = criteria
        self._filtered = ProductFilter.apply(self._products, criteria)
