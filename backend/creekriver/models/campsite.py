# backend/creekriver/models/campsite.py
from sqlalchemy import Integer, String, Column, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base
from .campsite_type import CampsiteType

class Campsite(Base):
    __tablename__ = "campsites"
    id = Column(Integer, primary_key=True)
    nickname = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    campsite_type_id = Column(
        Integer, ForeignKey("campsite_types.id", ondelete="CASCADE"), nullable=False
    )

    # 親方向のみ。子（reservations）の削除は DB の ON DELETE CASCADE に任せる
    campsite_type = relationship(CampsiteType, lazy="select")
