"""Product listing management view."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from seller_dashboard.api import ApiError, SessionExpired, ValidationFailure, describe_failure
from seller_dashboard.data.models import Product, ProductCreate, ProductEdit
from seller_dashboard.observability import trace
from seller_dashboard.state import OptimisticCollection
from seller_dashboard.utils import normalize_text, parse_amount, parse_count, require_fields
from seller_dashboard.views.base import ViewController
from seller_dashboard.views.navigation import View
from seller_dashboard.views.previews import PreviewSet

logger = logging.getLogger(__name__)

PRODUCT_FORM_FIELDS = ("name", "description", "price", "category", "stock")


@dataclass
class EditState:
    """Inline price/stock editor for one product; values as typed."""

    product_id: int
    price: str
    stock: str


def build_product(form: Mapping[str, Any], images: list[str] | None = None) -> ProductCreate:
    """
    Validate the new-product form.

    Args:
        form: Raw widget values keyed by field name
        images: Durable image URLs

    Raises:
        ValidationFailure: A required field is missing or not a valid number
    """
    require_fields(form, PRODUCT_FORM_FIELDS)
    try:
        return ProductCreate(
            name=normalize_text(form["name"], max_length=200),
            description=str(form["description"]).strip(),
            price=parse_amount(form["price"], "price"),
            category=normalize_text(form["category"], max_length=100),
            stock=parse_count(form["stock"], "stock"),
            images=images or [],
        )
    except ValidationError as e:
        raise ValidationFailure(f"Invalid product: {e.errors()[0]['msg']}") from e


class ProductsController(ViewController):
    """Lists products grouped by category and dispatches listing mutations."""

    view = View.PRODUCTS

    def __init__(self, *args, previews: PreviewSet | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.products: OptimisticCollection[Product] = OptimisticCollection(name="Product")
        self.previews = previews or PreviewSet()
        self.editing: EditState | None = None

    @trace(name="products_refresh", trace_type="view")
    async def refresh(self) -> None:
        try:
            self.products.replace_all(await self.api.list_products())
        except ApiError as e:
            logger.error(f"Error fetching products: {e}")
            self.notifier.error("Failed to fetch products")

    def by_category(self) -> dict[str, list[Product]]:
        """Products grouped by category, categories in first-seen order."""
        groups: dict[str, list[Product]] = {}
        for product in self.products:
            groups.setdefault(product.category, []).append(product)
        return groups

    # New product

    def select_images(self, paths: Iterable[str | Path] | None) -> list[str]:
        """Replace the selected images and return their preview paths."""
        return self.previews.replace(paths or [])

    @trace(name="create_product", trace_type="view")
    async def create_product(self, form: Mapping[str, Any]) -> bool:
        """
        Upload the selected images, then create the product with their URLs.

        The create call carries only URLs returned by the upload endpoint,
        never local preview paths. Previews are released after success and
        kept after a failure so the seller can retry.

        Returns:
            True when the product was created
        """
        try:
            draft = build_product(form)
        except ValidationFailure as e:
            self.notifier.error(str(e))
            return False

        try:
            urls: list[str] = []
            if self.previews.sources:
                upload = await self.api.upload_images(self.previews.sources)
                urls = upload.urls
            local = [url for url in urls if self.previews.is_local(url)]
            if local:
                raise ValidationFailure(f"Upload returned local file paths: {', '.join(local)}", ["images"])
            product = ProductCreate.model_validate({**draft.model_dump(), "images": urls})
            await self.api.create_product(product)
        except (ApiError, OSError, ValidationError, ValidationFailure) as e:
            logger.error(f"Error creating product: {e}")
            self.notifier.error(describe_failure(e, "Failed to create product"))
            return False

        self.previews.release()
        self.notifier.success("Product created successfully")
        await self.refresh()
        return True

    # Inline edit

    def start_edit(self, product_id: int) -> EditState | None:
        product = self.products.get(product_id)
        if product is None:
            self.notifier.error("Product not found")
            return None
        self.editing = EditState(product_id=product_id, price=str(product.price), stock=str(product.stock))
        return self.editing

    def cancel_edit(self) -> None:
        self.editing = None

    @trace(name="save_product_edit", trace_type="view")
    async def save_edit(self, price: Any = None, stock: Any = None) -> bool:
        """
        Send the edited price and stock of the product being edited.

        Args:
            price: New price as typed (defaults to the editor's value)
            stock: New stock as typed (defaults to the editor's value)
        """
        if self.editing is None:
            return False
        if price is not None:
            self.editing.price = str(price)
        if stock is not None:
            self.editing.stock = str(stock)

        try:
            edit = ProductEdit(
                price=parse_amount(self.editing.price, "price"),
                stock=parse_count(self.editing.stock, "stock"),
            )
        except ValidationFailure as e:
            self.notifier.error(str(e))
            return False

        try:
            await self.api.update_product(self.editing.product_id, edit)
        except ApiError as e:
            logger.error(f"Error updating product {self.editing.product_id}: {e}")
            self.notifier.error(describe_failure(e, "Failed to update product"))
            return False

        self.notifier.success("Product updated successfully")
        self.editing = None
        await self.refresh()
        return True

    # Activation and deletion

    @trace(name="toggle_product", trace_type="view")
    async def toggle_active(self, product_id: int) -> bool:
        try:
            await self.api.toggle_product(product_id)
        except ApiError as e:
            logger.error(f"Error updating product {product_id} status: {e}")
            self.notifier.error("Failed to update product status")
            return False

        self.notifier.success("Product status updated")
        await self.refresh()
        return True

    @trace(name="delete_product", trace_type="view")
    async def delete_product(self, product_id: int, confirmed: bool = False) -> bool:
        """
        Delete a product after the seller confirmed it.

        Returns:
            True when the server deleted the product
        """
        if not confirmed:
            return False

        if not self.guard.token_store.get():
            self.notifier.error("Authentication required")
            self.guard.navigator.redirect(View.LOGIN)
            return False

        try:
            result = await self.api.delete_product(product_id)
        except ApiError as e:
            logger.error(f"Error deleting product {product_id}: {e}")
            include_text = not isinstance(e, SessionExpired)
            self.notifier.error(describe_failure(e, "Failed to delete product", include_exception_text=include_text))
            return False

        self.products.remove(product_id)
        if self.editing and self.editing.product_id == product_id:
            self.editing = None
        self.notifier.success(result.message or "Product deleted")
        return True

    def close(self) -> None:
        """Release any previews still held."""
        self.previews.release()
