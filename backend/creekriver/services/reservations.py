# backend/creekriver/services/reservations.py
from sqlalchemy.orm import Session, joinedload

from creekriver.models.campsite import Campsite
from creekriver.models.reservation import Reservation
from creekriver.schemas.reservation import ReservationIn
from .errors import commit_or_invalid


def list_reservations(db: Session) -> list[Reservation]:
    return (
        db.query(Reservation)
        .options(
            joinedload(Reservation.user_profile),
            joinedload(Reservation.campsite).joinedload(Campsite.campsite_type),
        )
        .order_by(Reservation.checkin_date.asc(), Reservation.id.asc())
        .all()
    )


def create_reservation(db: Session, payload: ReservationIn) -> Reservation:
    """
    Insert a reservation as submitted.
    Dates are not compared and overlapping stays are not checked;
    only the store's FK / NOT NULL constraints can reject the row.
    """
    obj = Reservation(
        campsite_id=payload.campsite_id,
        user_profile_id=payload.user_profile_id,
        checkin_date=payload.checkin_date,
        checkout_date=payload.checkout_date,
    )
    db.add(obj)
    commit_or_invalid(db)
    db.refresh(obj)
    return obj


def delete_reservation(db: Session, reservation_id: int) -> bool:
    r = db.get(Reservation, reservation_id)
    if not r:
        return False
    db.delete(r)
    db.commit()
    return True
