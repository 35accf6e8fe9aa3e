import logging
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session

from creekriver.config import get_settings
# モデル定義側の Base（creekriver.models.base）を利用してメタデータを統一
from creekriver.models.base import Base

logger = logging.getLogger(__name__)


def _default_database_url() -> str:
    # 1) DATABASE_URL が指定されていれば優先（例: postgresql+psycopg://...）
    # 2) それ以外は SQLite を使用
    settings = get_settings()
    if settings.database_url:
        return settings.database_url
    _container_data = Path("/app/data")
    if _container_data.exists():
        db_path = _container_data / "creekriver.db"
    else:
        # backend/creekriver/db.py → ../../.. = <repo root>
        repo_root = Path(__file__).resolve().parents[2]
        db_path = repo_root / "data" / "creekriver.db"
    # ディレクトリ作成（存在しない場合）
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path}"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite は接続ごとに有効化しないと FK / ON DELETE CASCADE が効かない
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(url: str, **kwargs) -> Engine:
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    eng = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(eng, "connect", _enable_sqlite_foreign_keys)
    return eng


SQLALCHEMY_DATABASE_URL = _default_database_url()
engine = make_engine(SQLALCHEMY_DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine | None = None, seed: bool = True) -> None:
    # パッケージ配下の各モデルモジュールを明示 import してメタデータ登録を確実化
    import creekriver.models.campsite_type  # noqa: F401
    import creekriver.models.campsite  # noqa: F401
    import creekriver.models.user_profile  # noqa: F401
    import creekriver.models.reservation  # noqa: F401
    from creekriver.services.seed import seed_database

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created (if they didn't exist previously).")

    if not seed:
        return
    with Session(bind=bind) as db:
        inserted = seed_database(db)
    logger.info("Seed data loaded: %d row(s) inserted", inserted)


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
