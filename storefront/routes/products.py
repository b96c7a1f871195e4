"""Product stock updates. Saving fires the low-stock notification hooks."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from storefront.core.config import get_settings
from storefront.core.exceptions import RecordNotFoundError, RecordPersistError
from storefront.dependencies import get_record_store
from storefront.schemas.product import ProductStockRead, ProductStockUpdate
from storefront.services.record_store import SQLAlchemyRecordStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/products", tags=["products"])


@router.patch("/{product_id}/stock", response_model=ProductStockRead)
async def update_product_stock(
    product_id: str,
    stock: ProductStockUpdate,
    store: SQLAlchemyRecordStore = Depends(get_record_store),
):
    """Set stock quantity and/or reorder level of a product."""
    try:
        record = await store.update(get_settings().PRODUCTS_COLLECTION, product_id, stock.to_fields())
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail=f"Product {product_id} not found")
    except RecordPersistError as e:
        logger.error(f"Error updating stock for product {product_id}: {e}")
        raise HTTPException(status_code=400, detail="Stock could not be updated")

    return ProductStockRead(**record.data)
