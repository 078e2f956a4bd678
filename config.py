import os
from pathlib import Path

# Which document store backs the API: "sqlite" (local file) or "firestore".
STORE_BACKEND = os.environ.get("GAMETRACKER_STORE_BACKEND", "sqlite")

# Path to the SQLite database file used by the sqlite backend.
DB_PATH = os.environ.get("GAMETRACKER_DB_PATH", str(Path(__file__).parent / "db.sqlite3"))

# Firestore project; None lets the client pick it up from the environment.
FIRESTORE_PROJECT = os.environ.get("GOOGLE_CLOUD_PROJECT")

JWT_SECRET = os.environ.get("GAMETRACKER_JWT_SECRET", "change-me-in-production-use-env")
JWT_ALGORITHM = os.environ.get("GAMETRACKER_JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("GAMETRACKER_TOKEN_EXPIRE_MINUTES", "60"))
BCRYPT_ROUNDS = int(os.environ.get("GAMETRACKER_BCRYPT_ROUNDS", "12"))

LOG_LEVEL = os.environ.get("GAMETRACKER_LOG_LEVEL", "INFO")

API_PREFIX = "/api/v1"
APP_VERSION = "1.0.0"
