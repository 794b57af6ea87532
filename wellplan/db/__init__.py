"""Database package: engine, session, base."""

from wellplan.db.session import async_session_maker, get_db

__all__ = ["async_session_maker", "get_db"]
