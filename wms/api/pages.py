"""
Server-rendered browser UI: dashboard, inventory table, product modal and
delete confirmation.

All values reach the HTML through Jinja2 autoescaping.
"""
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from wms.config import get_settings
from wms.store import InventoryStore, get_store
from wms.schemas.product import ProductCreate, ProductUpdate
from wms.services.catalog import InvalidQuantityError, filter_products, parse_quantity, stock_status
from wms.services.dashboard_service import DashboardService
from wms.services.product_service import ProductService

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["Pages"], include_in_schema=False)

EMPTY_FORM = {"product_id": "", "sku": "", "name": "", "category": "", "qty": "", "image": ""}


def _product_service(store: InventoryStore) -> ProductService:
    return ProductService(store, default_image=get_settings().DEFAULT_IMAGE)


def _filter_query(search: str, category: str) -> str:
    params = {key: value for key, value in (("search", search), ("category", category)) if value}
    return urlencode(params)


def _validation_messages(error: ValidationError) -> list[str]:
    messages = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"])
        messages.append(f"{field}: {item['msg']}")
    return messages


def _render_inventory(
    request: Request,
    store: InventoryStore,
    search: str = "",
    category: str = "",
    modal: Optional[dict] = None,
    confirm_delete: Optional[dict] = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    service = _product_service(store)
    rows = []
    errors = []
    for product in filter_products(store.products, search, category):
        try:
            status_label = stock_status(parse_quantity(product.get("qty")))
        except InvalidQuantityError as e:
            logger.error(f"Product #{product.get('id')} has an invalid stored quantity: {e}")
            errors.append(f"{product.get('sku')}: {e}")
            status_label = None
        rows.append({**product, "status": status_label})

    if errors and status_code == status.HTTP_200_OK:
        status_code = 422

    return templates.TemplateResponse(
        request,
        "inventory.html",
        {
            "products": rows,
            "total": len(rows),
            "categories": service.categories(),
            "search": search,
            "category": category,
            "filter_query": _filter_query(search, category),
            "modal": modal,
            "confirm_delete": confirm_delete,
            "errors": errors,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, name="dashboard_page")
def dashboard_page(request: Request, store: InventoryStore = Depends(get_store)):
    error = None
    stats = None
    try:
        stats = DashboardService(store).stats()
    except InvalidQuantityError as e:
        logger.error(f"Cannot compute dashboard stats: {e}")
        error = str(e)

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {"stats": stats, "error": error},
        status_code=status.HTTP_200_OK if error is None else 422,
    )


@router.get("/inventory", response_class=HTMLResponse, name="inventory_page")
def inventory_page(
    request: Request,
    search: str = "",
    category: str = "",
    modal: Optional[str] = None,
    edit: Optional[int] = None,
    delete: Optional[int] = None,
    store: InventoryStore = Depends(get_store)
):
    """
    Inventory table.

    - **search** / **category**: filter the table
    - **modal=add**: open the empty "Add Product" modal
    - **edit=ID**: open the "Edit Product" modal prefilled (unknown ids open nothing)
    - **delete=ID**: ask for confirmation before deleting
    """
    service = _product_service(store)
    product_modal = None
    confirm_delete = None

    if edit is not None:
        product = service.get_by_id(edit)
        if product:
            form = {key: product.get(key, "") for key in EMPTY_FORM if key != "product_id"}
            form["product_id"] = product["id"]
            product_modal = {"title": "Edit Product", "form": form, "errors": []}
    elif modal == "add":
        product_modal = {"title": "Add Product", "form": dict(EMPTY_FORM), "errors": []}

    if delete is not None:
        confirm_delete = service.get_by_id(delete)

    return _render_inventory(request, store, search, category, product_modal, confirm_delete)


@router.post("/inventory/save", name="save_product")
def save_product(
    request: Request,
    product_id: Optional[int] = Form(None),
    sku: str = Form(""),
    name: str = Form(""),
    category: str = Form(""),
    qty: str = Form(""),
    image: str = Form(""),
    filter_search: str = Form(""),
    filter_category: str = Form(""),
    store: InventoryStore = Depends(get_store)
):
    """Handle the product modal: empty product_id creates, otherwise updates."""
    fields = {"sku": sku, "name": name, "category": category, "qty": qty, "image": image}
    service = _product_service(store)

    try:
        if product_id is None:
            service.create(ProductCreate(**fields))
        else:
            # Unknown ids are ignored, matching the table's silent behaviour
            service.update(product_id, ProductUpdate(**fields))
    except ValidationError as e:
        title = "Add Product" if product_id is None else "Edit Product"
        form = {**fields, "product_id": "" if product_id is None else product_id}
        modal = {"title": title, "form": form, "errors": _validation_messages(e)}
        return _render_inventory(
            request,
            store,
            search=filter_search,
            category=filter_category,
            modal=modal,
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    return RedirectResponse(url="/inventory", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/inventory/{product_id}/delete", name="delete_product_page")
def delete_product_page(product_id: int, store: InventoryStore = Depends(get_store)):
    _product_service(store).delete(product_id)
    return RedirectResponse(url="/inventory", status_code=status.HTTP_303_SEE_OTHER)
