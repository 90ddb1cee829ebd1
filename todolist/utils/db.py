import logging

from bson import ObjectId
from bson.errors import InvalidId
from flask import current_app
from pymongo import MongoClient

from todolist.errors import InvalidIdentifierError

logger = logging.getLogger(__name__)


def connect(config):
    """Create a MongoClient from the app config (the connection itself is lazy)."""
    return MongoClient(config["MONGO_URI"], serverSelectionTimeoutMS=config["MONGO_TIMEOUT_MS"])


def ping(client):
    """Raise a pymongo error if the server cannot be reached."""
    client.admin.command("ping")


def init_app(app, client=None):
    """Attach a Mongo client to ``app`` for the lifetime of the process."""
    if client is None:
        client = connect(app.config)
    app.extensions["mongo"] = client
    return client


def get_client(app=None):
    app = app or current_app
    return app.extensions["mongo"]


def get_db(app=None):
    app = app or current_app
    return get_client(app)[app.config["MONGO_DB_NAME"]]


def get_collection(app=None):
    app = app or current_app
    return get_db(app)[app.config["MONGO_COLLECTION"]]


def close(app):
    client = app.extensions.pop("mongo", None)
    if client is not None:
        logger.info("Closing MongoDB client")
        client.close()


def to_object_id(value):
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(f"Identifiant invalide : {value}") from exc
