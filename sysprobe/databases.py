"""Database back ends selected by name."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .models import ServiceConfig

logger = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    """Raised when a database connection cannot be established."""


class Database(ABC):
    """A database back end that can be connected from the service config."""

    @abstractmethod
    def connect(self, config: ServiceConfig) -> None:
        """Open the connection described by ``config``."""


def connection_uri(config: ServiceConfig) -> str:
    """Build the MongoDB connection string for ``config``.

    The URI is assembled from the individual settings only when a
    connection path is configured; otherwise the (empty) path is used.
    """
    db = config.database
    if db.conn_path:
        return (
            f"mongodb://{db.description.username}:{db.description.password}"
            f"@{db.host}:{db.port}/{db.base_name}?authSource={db.auth_source}"
        )
    return db.conn_path


class MongoDatabase(Database):
    """MongoDB back end."""

    def __init__(self) -> None:
        self.client: MongoClient | None = None
        self.database: str = ""

    def connect(self, config: ServiceConfig) -> None:
        """Connect to MongoDB and verify the connection with a ping."""
        logger.debug("begin MongoDB init")
        logger.info("%s", config)
        self.database = config.database.base_name

        uri = connection_uri(config)
        logger.debug("connecting to %s", uri)
        try:
            self.client = MongoClient(uri)
        except (PyMongoError, ValueError, TypeError) as exc:
            raise DatabaseConnectionError(f"{uri!r}: {exc}") from exc

        try:
            self.client.admin.command("ping")
        except PyMongoError as exc:
            raise DatabaseConnectionError(str(exc)) from exc

        logger.debug("successfully connected to MongoDB")


def new_database(database_type: str) -> Database | None:
    """Return the back end for ``database_type``, or None if unknown."""
    logger.info("databases type: %s", database_type)
    if database_type == "mongodb":
        return MongoDatabase()
    return None