from sqlalchemy import MetaData, create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from catalog.config import settings
import logging

logger = logging.getLogger(__name__)

# Naming conventions keep Alembic-generated constraint names stable across databases
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def normalize_database_url(database_url: str) -> str:
    # Some hosts provide postgres:// but SQLAlchemy needs postgresql://
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)
    return database_url


def _enable_sqlite_transactions(engine: Engine) -> None:
    """
    Make pysqlite honour foreign keys and SAVEPOINTs.

    pysqlite defers BEGIN until the first DML statement and ignores
    foreign keys unless asked, so the driver's own transaction handling is
    switched off and SQLAlchemy emits BEGIN itself.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_catalog_engine(database_url: str, **kwargs) -> Engine:
    """Create an engine configured for the catalog's transactional writes."""
    database_url = normalize_database_url(database_url)

    # SQLite doesn't support pool_size and max_overflow
    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)  # Needed for SQLite
        engine = create_engine(database_url, connect_args=connect_args, echo=settings.SQL_ECHO, **kwargs)
        _enable_sqlite_transactions(engine)
        return engine

    options = {
        "pool_pre_ping": True,  # Verify connections before using
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 3600,  # Recycle connections after 1 hour
        "echo": settings.SQL_ECHO,
    }
    options.update(kwargs)
    return create_engine(database_url, **options)


engine = create_catalog_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base(metadata=MetaData(naming_convention=NAMING_CONVENTION))


def get_db():
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class UnitOfWork:
    """
    Transaction scope for a multi-step write.

    Created by the caller and handed to the write operation, which enters
    it around the statements that must succeed or fail together::

        uow = UnitOfWork(db)
        product = create_product_with_variants(uow, payload)

    Leaving the block normally commits; leaving it with an exception rolls
    the whole transaction back and re-raises.
    """

    def __init__(self, session: Session):
        self.session = session

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            try:
                self.session.commit()
            except Exception:
                self.session.rollback()
                raise
        else:
            logger.warning(f"Rolling back unit of work: {exc_type.__name__}: {exc}")
            self.session.rollback()
        return False


def db_healthcheck() -> bool:
    """Return True if the database answers `SELECT 1`."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as exc:
        logger.error(f"Database healthcheck failed: {exc}")
        return False
