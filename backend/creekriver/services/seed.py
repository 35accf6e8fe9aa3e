# backend/creekriver/services/seed.py
"""
初期データ投入。
主キーが未登録の行だけを INSERT するため、何度実行しても重複しない。
"""
import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.orm import Session

from creekriver.models.campsite import Campsite
from creekriver.models.campsite_type import CampsiteType
from creekriver.models.reservation import Reservation
from creekriver.models.user_profile import UserProfile

logger = logging.getLogger(__name__)

CAMPSITE_TYPES = [
    {"id": 1, "name": "Tent", "fee_per_night": Decimal("15.99"), "max_reservation_days": 7},
    {"id": 2, "name": "RV", "fee_per_night": Decimal("26.50"), "max_reservation_days": 14},
    {"id": 3, "name": "Primitive", "fee_per_night": Decimal("10.00"), "max_reservation_days": 3},
    {"id": 4, "name": "Hammock", "fee_per_night": Decimal("12.00"), "max_reservation_days": 7},
]

CAMPSITES = [
    {
        "id": 1,
        "campsite_type_id": 1,
        "nickname": "Barred Owl",
        "image_url": "https://tnstateparks.com/assets/images/content-images/campgrounds/249/colsp-area2-site73.jpg",
    },
    {
        "id": 2,
        "campsite_type_id": 2,
        "nickname": "Screechy Rooster Mornings Campgrounds",
        "image_url": "https://hipcamp-res.cloudinary.com/f_auto,c_limit,w_1120,q_60/v1683846899/land-photos/cylaydbzi96nta6h5oms.jpg",
    },
    {
        "id": 3,
        "campsite_type_id": 3,
        "nickname": "Explorer's Respite",
        "image_url": "https://explorerchick.com/wp-content/uploads/2023/08/campsite1.jpg",
    },
    {
        "id": 4,
        "campsite_type_id": 4,
        "nickname": "The Sleepy Sloth",
        "image_url": "https://en.pimg.jp/084/266/196/1/84266196.jpg",
    },
    {
        "id": 5,
        "campsite_type_id": 2,
        "nickname": "Wrangled Wildlife Campsites",
        "image_url": "https://www.visitarizona.com/places/parks-monuments/patagonia-lake-state-park/",
    },
    {
        "id": 6,
        "campsite_type_id": 3,
        "nickname": "FreeCamp Campgrounds",
        "image_url": "https://static01.nyt.com/images/2021/04/25/multimedia/25ah-camping/merlin_186621867_547397c8-d887-4bbb-a094-d17f15b6cd95-jumbo.jpg?quality=75&auto=webp",
    },
]

USER_PROFILES = [
    {"id": 1, "first_name": "Roger", "last_name": "Rogers", "email": "Roger@Rogers.com"},
    {"id": 2, "first_name": "Bill", "last_name": "Billington", "email": "Bill@Billington.com"},
]

# checkout は既存データどおり未設定（最小日時）
RESERVATIONS = [
    {
        "id": 1,
        "campsite_id": 2,
        "user_profile_id": 1,
        "checkin_date": datetime(2022, 12, 10),
        "checkout_date": datetime.min,
    },
    {
        "id": 2,
        "campsite_id": 1,
        "user_profile_id": 2,
        "checkin_date": datetime(2022, 12, 12),
        "checkout_date": datetime.min,
    },
]

# 親テーブルから順に投入（FK 制約のため）
SEED_ROWS = [
    (CampsiteType, CAMPSITE_TYPES),
    (Campsite, CAMPSITES),
    (UserProfile, USER_PROFILES),
    (Reservation, RESERVATIONS),
]


def _sync_identity_sequences(db: Session) -> None:
    # PostgreSQL: 主キーを明示投入したのでシーケンスを最大値まで進める
    for model, _ in SEED_ROWS:
        table = model.__tablename__
        db.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"COALESCE((SELECT MAX(id) FROM {table}), 1))"
            )
        )


def seed_database(db: Session) -> int:
    """Insert every seed row whose primary key is absent; return how many were added."""
    inserted = 0
    for model, rows in SEED_ROWS:
        for row in rows:
            if db.get(model, row["id"]) is not None:
                continue
            db.add(model(**row))
            inserted += 1
        # 子テーブルの投入前に親を確定
        db.flush()

    if inserted and db.get_bind().dialect.name == "postgresql":
        _sync_identity_sequences(db)
    db.commit()
    logger.debug("seed_database inserted %d row(s)", inserted)
    return inserted
