from devevent.database.engine import Database, open_database
from devevent.database.cache import (
    ConnectionCache,
    ConnectionState,
    acquire_connection,
    connection_cache,
)

__all__ = [
    "Database",
    "open_database",
    "ConnectionCache",
    "ConnectionState",
    "acquire_connection",
    "connection_cache",
]
