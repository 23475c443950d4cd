import os

from playhouse.db_url import connect

# SQLite por defecto
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///tasks.db")

db = connect(DATABASE_URL)


def get_db():
    return db
