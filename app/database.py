from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.config.settings import settings

DATABASE_URL = make_url(settings.database_url)

engine_kwargs = {"pool_pre_ping": True}

if DATABASE_URL.get_backend_name() == "sqlite":
    engine_kwargs = {"connect_args": {"check_same_thread": False}}
    if DATABASE_URL.database in (None, "", ":memory:"):
        # One shared connection, otherwise every session sees an empty database
        engine_kwargs["poolclass"] = StaticPool
elif settings.DB_SSLMODE:
    # If you're using PostgreSQL on Render or similar, set DB_SSLMODE=require
    engine_kwargs["connect_args"] = {"sslmode": settings.DB_SSLMODE}

engine = create_engine(DATABASE_URL, **engine_kwargs)

if engine.dialect.name == "sqlite":
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# ✅ This is required to be imported wherever DB session is needed
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
