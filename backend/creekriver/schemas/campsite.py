# backend/creekriver/schemas/campsite.py
from decimal import Decimal
from typing import Optional

from .commons import CamelModel, RowId


class CampsiteTypeOut(CamelModel):
    id: int
    name: str
    max_reservation_days: int
    fee_per_night: Decimal  # JSON では "15.99" の文字列（float 化しない）


class CampsiteIn(CamelModel):
    # id は受け取っても無視（採番は DB）
    # 空文字・空白のみの nickname は services 側で InvalidDataError
    nickname: str
    image_url: Optional[str] = None
    campsite_type_id: RowId


class CampsiteOut(CamelModel):
    id: int
    nickname: str
    image_url: Optional[str] = None
    campsite_type_id: int


class CampsiteDetailOut(CampsiteOut):
    campsite_type: CampsiteTypeOut
