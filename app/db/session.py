from sqlmodel import SQLModel, create_engine, Session
from app.core.config import settings

# check_same_thread is needed for SQLite, remove for PostgreSQL
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

def get_session():
    """Request-scoped session; FastAPI closes it after the response."""
    with Session(engine) as session:
        yield session

def create_db_and_tables(bind=None):
    # Models must be imported so their tables are on the metadata
    import app.models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)
