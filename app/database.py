# app/database.py
from sqlmodel import SQLModel, create_engine

from app.core.config import get_settings
from app.core.storage import SQLStorage

settings = get_settings()

# ---------------------------------------------------------
# Local storage engine
#
# - SQLite file by default (DATABASE_URL overrides it)
# - check_same_thread=False: storage calls run in worker threads
#   (anyio.to_thread) while the engine lives on the main thread
# ---------------------------------------------------------

db_url = settings.DATABASE_URL

connect_args = {}
if db_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    db_url,
    echo=False,        # set to True if you want to debug SQL queries
    pool_pre_ping=True,
    connect_args=connect_args,
)

storage = SQLStorage(engine)


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def get_storage() -> SQLStorage:
    """
    Process-wide storage backend used by the service dependencies.
    """
    return storage
