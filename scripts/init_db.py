# scripts/init_db.py
# スキーマ作成 + 初期データ投入（何度実行しても重複しない）
import logging

from creekriver.db import engine, init_db

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(message)s")
print("database:", engine.url)
init_db()
