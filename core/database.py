from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from core.config import settings
from utils.logger import get_logger

logger = get_logger(__name__)

# SQLite connections are shared across the threadpool FastAPI runs sync deps in
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    echo=settings.DB_ECHO,
    pool_pre_ping=True
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    """
    Verify the database is reachable and create missing tables.

    Called once from the application lifespan on startup.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))

    Base.metadata.create_all(bind=engine)
    logger.info("Database connected", extra={"event": "db_connect"})


def close_db():
    engine.dispose()
    logger.info("Database connections released", extra={"event": "db_disconnect"})
