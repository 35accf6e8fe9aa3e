import unittest
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from creekriver.models.campsite import Campsite
from creekriver.models.campsite_type import CampsiteType
from creekriver.models.reservation import Reservation
from creekriver.models.user_profile import UserProfile
from creekriver.services import campsites, reservations
from creekriver.services.seed import seed_database
from support import make_seeded_engine


class SeedAndSchemaTests(unittest.TestCase):
    def setUp(self):
        self.engine = make_seeded_engine()
        self.db = Session(bind=self.engine)

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def count(self, model) -> int:
        return self.db.scalar(select(func.count()).select_from(model))

    def test_seed_counts(self):
        self.assertEqual(self.count(CampsiteType), 4)
        self.assertEqual(self.count(Campsite), 6)
        self.assertEqual(self.count(UserProfile), 2)
        self.assertEqual(self.count(Reservation), 2)

    def test_seed_is_idempotent(self):
        self.assertEqual(seed_database(self.db), 0)
        self.assertEqual(self.count(Campsite), 6)
        self.assertEqual(self.count(Reservation), 2)

    def test_reseed_restores_missing_rows_only(self):
        self.db.delete(self.db.get(Campsite, 1))
        self.db.commit()
        # campsite 1 と、それに紐づく reservation 2 が復元される
        self.assertEqual(seed_database(self.db), 2)
        self.assertEqual(self.count(Campsite), 6)
        self.assertEqual(self.count(Reservation), 2)

    def test_fee_per_night_keeps_decimal_precision(self):
        fees = {t.name: t.fee_per_night for t in self.db.query(CampsiteType).all()}
        self.assertEqual(fees["Tent"], Decimal("15.99"))
        self.assertEqual(fees["RV"], Decimal("26.50"))
        self.assertIsInstance(fees["Hammock"], Decimal)

    def test_deleting_campsite_type_cascades_to_campsites(self):
        self.db.delete(self.db.get(CampsiteType, 2))
        self.db.commit()
        remaining = [c.id for c in campsites.list_campsites(self.db)]
        self.assertEqual(remaining, [1, 3, 4, 6])
        # campsite 2 の予約も連鎖削除
        self.assertEqual([r.id for r in reservations.list_reservations(self.db)], [2])

    def test_deleting_user_profile_cascades_to_reservations(self):
        self.db.delete(self.db.get(UserProfile, 1))
        self.db.commit()
        self.assertEqual([r.user_profile_id for r in reservations.list_reservations(self.db)], [2])
        self.assertEqual(self.count(Campsite), 6)

    def test_list_reservations_loads_two_levels(self):
        first = reservations.list_reservations(self.db)[0]
        self.assertEqual(first.user_profile.last_name, "Rogers")
        self.assertEqual(first.campsite.campsite_type.name, "RV")

    def test_get_campsite_returns_none_when_missing(self):
        self.assertIsNone(campsites.get_campsite(self.db, 404))
        self.assertFalse(campsites.delete_campsite(self.db, 404))
        self.assertFalse(reservations.delete_reservation(self.db, 404))


if __name__ == "__main__":
    unittest.main()
