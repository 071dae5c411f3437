"""Database session dependency.

``get_session`` is the dependency itself, so an exception raised by the
handler reaches its rollback branch.
"""

from exchange_office.infrastructure.database.session import get_session as get_db_session

__all__ = ["get_db_session"]
