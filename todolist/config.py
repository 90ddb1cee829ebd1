import os

from dotenv import load_dotenv

# Load .env from project root so local development MONGO_URI is picked up
load_dotenv()


class Config:
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/todo_app")
    MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "todo_app")
    MONGO_COLLECTION = os.environ.get("MONGO_COLLECTION", "tasks")
    MONGO_TIMEOUT_MS = int(os.environ.get("MONGO_TIMEOUT_MS", "2000"))

    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = int(os.environ.get("PORT", "3002"))

    # Origin allowed to call the API from a browser ("*" allows any)
    CLIENT_ORIGIN = os.environ.get("CLIENT_ORIGIN", "*")
    TASKS_URL_PREFIX = os.environ.get("TASKS_URL_PREFIX", "/api/tasks")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"
