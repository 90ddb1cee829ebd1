import logging
import signal
import sys

from flask import Flask, jsonify, request
from flask_cors import CORS
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from todolist.config import Config
from todolist.errors import TaskError

logger = logging.getLogger(__name__)


def configure_logging(level=None):
    logging.basicConfig(
        level=(level or Config.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(config_overrides=None, mongo_client=None):
    """Build the Flask app.

    ``mongo_client`` replaces the client normally built from MONGO_URI
    (tests hand in an in-memory one).
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # Core extensions
    CORS(app, origins=app.config["CLIENT_ORIGIN"])

    from todolist.utils.db import init_app as init_db

    init_db(app, mongo_client)

    from todolist.routes.task_routes import tasks_bp

    app.register_blueprint(tasks_bp, url_prefix=app.config["TASKS_URL_PREFIX"])

    @app.get("/health")
    def health():
        return jsonify(status="ok", message="Le serveur fonctionne !"), 200

    @app.errorhandler(TaskError)
    def task_error(err):
        if err.status_code >= 500:
            app.logger.error("%s %s failed: %r", request.method, request.path, err.__cause__ or err)
        return jsonify(message=err.message), err.status_code

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def route_not_found(_):
        path = request.path
        if request.query_string:
            path = f"{path}?{request.query_string.decode('utf-8', 'replace')}"
        return jsonify(message=f"Route {request.method} {path} introuvable"), 404

    @app.errorhandler(HTTPException)
    def http_error(err):
        return jsonify(message=err.description), err.code

    @app.errorhandler(Exception)
    def server_error(_):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify(message="Erreur serveur"), 500

    return app


def check_database(app):
    """Ping MongoDB; a server we cannot reach is fatal."""
    from todolist.utils.db import get_client, ping

    try:
        ping(get_client(app))
    except PyMongoError as exc:
        logger.error("Cannot reach MongoDB at %s: %s", app.config["MONGO_URI"], exc)
        logger.error("Is mongod running? (docker run -d -p 27017:27017 mongo)")
        sys.exit(1)
    logger.info("Connected to MongoDB")


def _log_routes(app):
    base = f"http://{app.config['HOST']}:{app.config['PORT']}"
    prefix = app.config["TASKS_URL_PREFIX"]
    logger.info("Server listening on %s", base)
    logger.info("  GET    %s%s          list tasks", base, prefix)
    logger.info("  POST   %s%s          create a task", base, prefix)
    logger.info("  PUT    %s%s/<id>     update a task", base, prefix)
    logger.info("  DELETE %s%s/<id>     delete a task", base, prefix)
    logger.info("  GET    %s/health     health check", base)


def main():
    configure_logging()
    app = create_app()
    check_database(app)

    from todolist.utils.db import close

    # Turn SIGTERM into SystemExit so the client is closed below
    signal.signal(signal.SIGTERM, lambda *_: sys.exit(0))
    _log_routes(app)
    try:
        app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
    finally:
        close(app)


if __name__ == "__main__":
    # Direct run support: python -m todolist.app
    main()
