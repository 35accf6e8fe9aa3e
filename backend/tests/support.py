import unittest

from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from creekriver.db import get_db, init_db, make_engine
from creekriver.main import app


def make_seeded_engine():
    """In-memory SQLite shared across threads, with schema and seed data loaded."""
    engine = make_engine("sqlite+pysqlite://", poolclass=StaticPool)
    init_db(engine)
    return engine


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.engine = make_seeded_engine()
        self.Session = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def _get_test_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_test_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.engine.dispose()
