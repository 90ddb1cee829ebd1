import atexit

from todolist.app import check_database, configure_logging, create_app
from todolist.utils.db import close

# Expose a module-level `app` for WSGI servers (gunicorn expects `app:app`).
# A MongoDB server that cannot be reached stops the worker from booting.
configure_logging()
app = create_app()
check_database(app)
atexit.register(close, app)


if __name__ == "__main__":
    # Local development only: prefer `python -m todolist.app`.
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
