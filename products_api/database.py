import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from products_api.config import Settings, get_settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured database.

    Server databases get a sized connection pool with pre-ping; SQLite
    connections are allowed to cross threads, and an in-memory SQLite
    database is pinned to a single shared connection.
    """
    url = make_url(settings.DATABASE_URL)

    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=settings.DB_ECHO, **kwargs)

    return create_engine(
        url,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


# Create SQLAlchemy engine with connection pooling
engine = build_engine(get_settings())

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency to get database session.
    Yields a database session scoped to one request and closes it after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = None) -> None:
    """Create all tables known to the model metadata."""
    # Register the models on Base.metadata
    import products_api.models.product  # noqa: F401

    bind = bind or engine
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created successfully")
