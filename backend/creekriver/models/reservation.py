# backend/creekriver/models/reservation.py
from sqlalchemy import Integer, Column, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from .base import Base
from .campsite import Campsite
from .user_profile import UserProfile

class Reservation(Base):
    __tablename__ = "reservations"
    id = Column(Integer, primary_key=True)
    campsite_id = Column(Integer, ForeignKey("campsites.id", ondelete="CASCADE"), nullable=False)
    user_profile_id = Column(Integer, ForeignKey("user_profiles.id", ondelete="CASCADE"), nullable=False)
    checkin_date = Column(DateTime, nullable=False, index=True)
    checkout_date = Column(DateTime, nullable=False)

    campsite = relationship(Campsite, lazy="select")
    user_profile = relationship(UserProfile, lazy="select")
