"""Order creation. Saving an order fires the new-order notification hook."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from storefront.core.config import get_settings
from storefront.core.exceptions import RecordPersistError
from storefront.dependencies import get_record_store
from storefront.schemas.order import OrderCreate, OrderRead
from storefront.services.record_store import SQLAlchemyRecordStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderRead, status_code=201)
async def create_order(
    order: OrderCreate,
    store: SQLAlchemyRecordStore = Depends(get_record_store),
):
    """Create an order."""
    try:
        record = await store.create(get_settings().ORDERS_COLLECTION, order.to_fields())
    except RecordPersistError as e:
        logger.error(f"Error creating order: {e}")
        raise HTTPException(status_code=400, detail="Order could not be created")

    return OrderRead(**record.data)
