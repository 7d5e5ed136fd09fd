import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./storefront.db")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
ACCESS_TOKEN_EXPIRE_MINUTES = int(
    os.getenv(
        "ACCESS_TOKEN_EXPIRE_MINUTES",
        1440,
    )
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# =============================================================================
# Product Import
# =============================================================================

# roles allowed to run imports and undo them, comma separated
IMPORT_ADMIN_ROLES = [
    role.strip()
    for role in os.getenv("IMPORT_ADMIN_ROLES", "admin").split(",")
    if role.strip()
]

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
