from pydantic import BaseModel, Field, ConfigDict, computed_field
from typing import Optional

from wms.services.catalog import stock_status


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    sku: str = Field(..., min_length=1, max_length=64, description="Stock keeping unit (not required to be unique)")
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    category: str = Field("", max_length=128, description="Product category")
    qty: int = Field(..., ge=0, description="Quantity on hand (must be non-negative)")
    image: str = Field("", description="Image URL; blank means the configured default image")


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    model_config = ConfigDict(str_strip_whitespace=True)


class ProductUpdate(BaseModel):
    """Schema for updating an existing product. All fields are optional."""
    sku: Optional[str] = Field(None, min_length=1, max_length=64, description="Stock keeping unit")
    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Product name")
    category: Optional[str] = Field(None, max_length=128, description="Product category")
    qty: Optional[int] = Field(None, ge=0, description="Quantity on hand")
    image: Optional[str] = Field(None, description="Image URL")

    model_config = ConfigDict(str_strip_whitespace=True)


class ProductResponse(ProductBase):
    """Schema for product response including id and stock status."""
    id: int

    @computed_field
    @property
    def status(self) -> str:
        return stock_status(self.qty)


class ProductListResponse(BaseModel):
    """Schema for paginated product list response."""
    items: list[ProductResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
