from sqlalchemy import Column, String, JSON

from storefront.database import Base
from storefront.models.base import RecordMixin


class Category(RecordMixin, Base):
    __tablename__ = "categories"

    name = Column(String, nullable=False)
    image = Column(JSON, nullable=True)

    record_fields = {
        "name": "name",
        "image": "image",
    }
