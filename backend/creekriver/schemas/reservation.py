# backend/creekriver/schemas/reservation.py
import datetime as dt

from pydantic import field_validator

from .commons import CamelModel, RowId
from .campsite import CampsiteDetailOut


class UserProfileOut(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str


class ReservationIn(CamelModel):
    campsite_id: RowId
    user_profile_id: RowId
    # 未指定なら最小日時（既存データと同じ扱い）
    checkin_date: dt.datetime = dt.datetime.min
    checkout_date: dt.datetime = dt.datetime.min

    @field_validator("checkin_date", "checkout_date")
    @classmethod
    def to_naive_utc(cls, v: dt.datetime) -> dt.datetime:
        # DB 列はタイムゾーンなし。オフセット付きは UTC に揃えてから外す
        if v.tzinfo is not None:
            v = v.astimezone(dt.timezone.utc).replace(tzinfo=None)
        return v


class ReservationOut(CamelModel):
    id: int
    campsite_id: int
    user_profile_id: int
    checkin_date: dt.datetime
    checkout_date: dt.datetime


class ReservationDetailOut(ReservationOut):
    # 入れ子の campsite は reservations を持たない（循環参照なし）
    user_profile: UserProfileOut
    campsite: CampsiteDetailOut
