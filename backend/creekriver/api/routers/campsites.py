# backend/creekriver/api/routers/campsites.py
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response
from sqlalchemy.orm import Session

from creekriver.config import get_settings
from creekriver.db import get_db
from creekriver.schemas.campsite import CampsiteDetailOut, CampsiteIn, CampsiteOut
from creekriver.schemas.commons import INT32_MAX, INT32_MIN
from creekriver.services import campsites as repo
from creekriver.services.errors import InvalidDataError

router = APIRouter()

RowIdPath = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


@router.get("")
@router.get("/")
def list_campsites(db: Session = Depends(get_db)) -> list[CampsiteOut]:
    return [CampsiteOut.model_validate(c) for c in repo.list_campsites(db)]


@router.get("/{campsite_id}")
def get_campsite(campsite_id: RowIdPath, db: Session = Depends(get_db)) -> CampsiteDetailOut:
    c = repo.get_campsite(db, campsite_id)
    if not c:
        raise HTTPException(status_code=404, detail="Campsite not found")
    return CampsiteDetailOut.model_validate(c)


@router.post("", status_code=201)
@router.post("/", status_code=201)
def create_campsite(payload: CampsiteIn, response: Response, db: Session = Depends(get_db)) -> CampsiteOut:
    try:
        obj = repo.create_campsite(db, payload)
    except InvalidDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = f"{get_settings().api_prefix}/campsites/{obj.id}"
    return CampsiteOut.model_validate(obj)


@router.put("/{campsite_id}", status_code=204)
def update_campsite(campsite_id: RowIdPath, payload: CampsiteIn, db: Session = Depends(get_db)):
    try:
        found = repo.update_campsite(db, campsite_id, payload)
    except InvalidDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not found:
        raise HTTPException(status_code=404, detail="Campsite not found")
    return Response(status_code=204)


@router.delete("/{campsite_id}", status_code=204)
def delete_campsite(campsite_id: RowIdPath, db: Session = Depends(get_db)):
    if not repo.delete_campsite(db, campsite_id):
        raise HTTPException(status_code=404, detail="Campsite not found")
    return Response(status_code=204)
