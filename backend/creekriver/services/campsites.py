# backend/creekriver/services/campsites.py
from sqlalchemy.orm import Session, joinedload

from creekriver.models.campsite import Campsite
from creekriver.schemas.campsite import CampsiteIn
from .errors import commit_or_invalid, require_text


def list_campsites(db: Session) -> list[Campsite]:
    return db.query(Campsite).order_by(Campsite.id.asc()).all()


def get_campsite(db: Session, campsite_id: int) -> Campsite | None:
    # 親（campsite_type）を JOIN で同時取得
    return (
        db.query(Campsite)
        .options(joinedload(Campsite.campsite_type))
        .filter(Campsite.id == campsite_id)
        .one_or_none()
    )


def create_campsite(db: Session, payload: CampsiteIn) -> Campsite:
    obj = Campsite(
        nickname=require_text(payload.nickname, "nickname"),
        image_url=payload.image_url,
        campsite_type_id=payload.campsite_type_id,
    )
    db.add(obj)
    commit_or_invalid(db)
    db.refresh(obj)
    return obj


def update_campsite(db: Session, campsite_id: int, payload: CampsiteIn) -> bool:
    """Overwrite nickname, type and image URL. False when the campsite does not exist."""
    c = db.get(Campsite, campsite_id)
    if not c:
        return False
    # 部分更新ではなく全項目上書き（imageUrl 未指定なら None になる）
    c.nickname = require_text(payload.nickname, "nickname")
    c.campsite_type_id = payload.campsite_type_id
    c.image_url = payload.image_url
    commit_or_invalid(db)
    return True


def delete_campsite(db: Session, campsite_id: int) -> bool:
    c = db.get(Campsite, campsite_id)
    if not c:
        return False
    # reservations は ON DELETE CASCADE で削除される
    db.delete(c)
    db.commit()
    return True
