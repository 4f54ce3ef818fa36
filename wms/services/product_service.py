import logging
import math
from typing import List, Optional

from wms.schemas.product import ProductCreate, ProductUpdate
from wms.seed import PLACEHOLDER_IMAGE
from wms.services.catalog import filter_products, find_product, list_categories, next_product_id
from wms.store import InventoryStore

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product CRUD operations.

    This service handles:
    - Creating new products (id = max existing id + 1)
    - Reading and filtering products
    - Updating products (shallow merge of supplied fields)
    - Deleting products

    Every mutation rewrites the whole catalog snapshot.
    """

    def __init__(self, store: InventoryStore, default_image: str = PLACEHOLDER_IMAGE):
        self.store = store
        self.default_image = default_image

    def create(self, product_data: ProductCreate) -> dict:
        """
        Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product record
        """
        with self.store.lock:
            products = self.store.products
            product = {"id": next_product_id(products), **product_data.model_dump()}
            if not product["image"]:
                product["image"] = self.default_image
            self.store.save_products([*products, product])

        logger.info(f"Product #{product['id']} ({product['sku']}) created")
        return product

    def get_by_id(self, product_id: int) -> Optional[dict]:
        return find_product(self.store.products, product_id)

    def get_all(
        self,
        page: int = 1,
        page_size: int = 50,
        search: str = None,
        category: str = None
    ) -> tuple[List[dict], int, int]:
        """
        Get a page of products matching the search text and category.

        Args:
            page: Page number (1-indexed)
            page_size: Number of items per page
            search: Optional substring matched against name or SKU
            category: Optional exact category

        Returns:
            Tuple of (products list, total count, total pages)
        """
        matches = filter_products(self.store.products, search, category)

        total = len(matches)
        total_pages = math.ceil(total / page_size) if total > 0 else 1

        offset = (page - 1) * page_size
        return matches[offset:offset + page_size], total, total_pages

    def categories(self) -> list[str]:
        return list_categories(self.store.products)

    def update(self, product_id: int, product_data: ProductUpdate) -> Optional[dict]:
        """
        Update an existing product.

        Args:
            product_id: ID of product to update
            product_data: Update data (only supplied, non-None fields are merged)

        Returns:
            Updated product or None if not found
        """
        with self.store.lock:
            products = self.store.products
            index = next((i for i, item in enumerate(products) if item.get("id") == product_id), None)

            if index is None:
                return None

            update_data = {
                field: value
                for field, value in product_data.model_dump(exclude_unset=True).items()
                if value is not None
            }
            if "image" in update_data and not update_data["image"]:
                update_data["image"] = self.default_image

            product = {**products[index], **update_data, "id": product_id}
            self.store.save_products([*products[:index], product, *products[index + 1:]])

        logger.info(f"Product #{product_id} updated ({', '.join(sorted(update_data)) or 'no changes'})")
        return product

    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Args:
            product_id: ID of product to delete

        Returns:
            True if deleted, False if not found
        """
        with self.store.lock:
            products = self.store.products
            remaining = [item for item in products if item.get("id") != product_id]

            if len(remaining) == len(products):
                return False

            self.store.save_products(remaining)

        logger.info(f"Product #{product_id} deleted")
        return True
