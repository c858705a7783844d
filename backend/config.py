import os
import logging
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
# Default to local SQLite, but prefer environment variable (for Postgres deployments)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/transactions.db")

# Fix for common SQLAlchemy issues with postgres:// vs postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# --- Limits ---
DEFAULT_LIMIT_CURRENCY = os.getenv("DEFAULT_LIMIT_CURRENCY", "USD").strip().upper() or "USD"

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"

# Unknown names would make logging.basicConfig raise at import
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = "INFO"

# --- CORS (comma-separated origins) ---
CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
