from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from .exceptions import StoreBootstrapError
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the database engine for the given URL.

    Foreign keys are switched on for every new SQLite connection, otherwise
    the ON DELETE CASCADE rules of the grades table are ignored.

    Raises:
        StoreBootstrapError: if the URL cannot be turned into an engine
    """
    try:
        engine = create_engine(
            database_url,

            # Test connection before using (detect disconnects)
            pool_pre_ping=True,

            # SQL echo - useful for debugging
            echo=echo,
        )
    except (SQLAlchemyError, ValueError) as e:
        raise StoreBootstrapError(f"Cannot create engine: {e}", stage="open") from e

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", set_sqlite_pragma)
    return engine


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

def build_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory bound to the engine."""
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=engine,
        expire_on_commit=False  # Don't expire objects after commit
    )


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(engine: Engine):
    """
    Create all database tables defined in models.

    Idempotent: existing tables are left as they are.
    """
    # Import all models so Base knows every table
    from studentms.models import student, course, grade  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("✅ Database tables created successfully!")


def drop_database_tables(engine: Engine):
    """
    Drop all database tables.

    ⚠️ DANGER: This will delete all data!
    Only use in testing.
    """
    logger.warning("⚠️ Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("✅ Database tables dropped!")


def check_database_connection(engine: Engine) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("✅ Database connection successful!")
        return True
    except SQLAlchemyError as e:
        logger.error(f"❌ Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Event listener for new database connections.
    Enables foreign key enforcement (and with it the cascades).
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(engine: Engine) -> Session:
    """
    Initialize database.
    Run this once when starting the application; the returned session is the
    single store handle for the whole run.

    Raises:
        StoreBootstrapError: if the store cannot be opened or the schema
            cannot be created
    """
    logger.info("Initializing database...")

    # Check connection
    if not check_database_connection(engine):
        raise StoreBootstrapError("Cannot connect to database!", stage="open")

    try:
        create_database_tables(engine)
    except SQLAlchemyError as e:
        raise StoreBootstrapError(f"Cannot create tables: {e}", stage="init") from e

    session = build_session_factory(engine)()
    logger.info("✅ Database initialized successfully!")
    return session
