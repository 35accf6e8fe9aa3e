# backend/creekriver/api/routers/reservations.py
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.orm import Session

from creekriver.config import get_settings
from creekriver.db import get_db
from creekriver.schemas.reservation import ReservationDetailOut, ReservationIn, ReservationOut
from creekriver.schemas.commons import INT32_MAX, INT32_MIN
from creekriver.services import reservations as repo
from creekriver.services.errors import InvalidDataError

router = APIRouter()

RowIdPath = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


@router.get("")
@router.get("/")
def list_reservations(db: Session = Depends(get_db)) -> list[ReservationDetailOut]:
    """
    予約一覧（チェックイン日の昇順）。
    各予約に user_profile と campsite（+ campsite_type）を含める。
    """
    return [ReservationDetailOut.model_validate(r) for r in repo.list_reservations(db)]


@router.post("", status_code=201)
@router.post("/", status_code=201)
def create_reservation(payload: ReservationIn, response: Response, db: Session = Depends(get_db)) -> ReservationOut:
    try:
        obj = repo.create_reservation(db, payload)
    except InvalidDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = f"{get_settings().api_prefix}/reservations/{obj.id}"
    return ReservationOut.model_validate(obj)


@router.delete("/{reservation_id}", status_code=204)
def delete_reservation(reservation_id: RowIdPath, db: Session = Depends(get_db)):
    if not repo.delete_reservation(db, reservation_id):
        raise HTTPException(status_code=404, detail="Reservation not found")
    return Response(status_code=204)
