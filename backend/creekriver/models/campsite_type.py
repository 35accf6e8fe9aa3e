# backend/creekriver/models/campsite_type.py
from sqlalchemy import Integer, String, Numeric, Column
from .base import Base

class CampsiteType(Base):
    __tablename__ = "campsite_types"
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    max_reservation_days = Column(Integer, nullable=False)
    fee_per_night = Column(Numeric(10, 2), nullable=False)  # Decimal のまま扱う（float にしない）
