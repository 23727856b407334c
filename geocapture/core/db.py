from fastapi import Request
from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from geocapture.models.base import Base
from geocapture.models.location import Location


class LocationStore:
    """
    Pooled access to the location datastore.

    One instance is built per process by the application factory and shared by
    every request; it owns the engine (and therefore the connection pool), so
    handlers never open connections of their own.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_engine(
            database_url,
            pool_pre_ping=True,
            future=True,
            connect_args={"check_same_thread": False}
            if database_url.startswith("sqlite")
            else {},
        )
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )

        if echo:
            event.listen(self.engine, "before_cursor_execute", _log_statement)

    def session(self) -> Session:
        return self.session_factory()

    def init_db(self) -> None:
        logger.info("Creating database tables")
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created")

    def create_location(
        self,
        lat: float,
        lng: float,
        accuracy: float | None = None,
        user_agent: str | None = None,
    ) -> Location:
        location = Location(
            lat=lat,
            lng=lng,
            accuracy=accuracy,
            user_agent=user_agent,
        )

        with self.session() as db:
            db.add(location)
            try:
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                raise
            db.refresh(location)

        return location

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database pool disposed")


def _log_statement(conn, cursor, statement, parameters, context, executemany):
    logger.debug(f"SQL: {statement} | params={parameters}")


# --- FastAPI dependency ---
def get_store(request: Request) -> LocationStore:
    return request.app.state.store
