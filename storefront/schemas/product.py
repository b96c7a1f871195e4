"""
Schemas for product stock endpoints.
"""

from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ProductStockUpdate(BaseModel):
    """Body of PATCH /products/{id}/stock."""
    model_config = ConfigDict(populate_by_name=True)

    stock_quantity: Optional[int] = Field(default=None, ge=0, alias="stockQuantity")
    reorder_level: Optional[int] = Field(default=None, ge=0, alias="reorderLevel")

    @model_validator(mode="after")
    def check_not_empty(self):
        if self.stock_quantity is None and self.reorder_level is None:
            raise ValueError("stockQuantity or reorderLevel is required")
        return self

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ProductStockRead(BaseModel):
    id: str
    title: Optional[str] = None
    sku: Optional[str] = None
    stockQuantity: int
    reorderLevel: int
    updated: Optional[datetime] = None
