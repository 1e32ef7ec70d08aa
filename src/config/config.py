import os
from dotenv import load_dotenv
load_dotenv()

def get_database_url():
    database_url = os.getenv("DATABASE_URL")
    if database_url:
        return database_url

    MYSQL_USER = os.getenv("MYSQL_USER")
    MYSQL_PASSWORD = os.getenv("MYSQL_PASSWORD")
    MYSQL_HOST = os.getenv("MYSQL_HOST", "mysql")
    MYSQL_PORT = os.getenv("MYSQL_PORT", "3306")
    MYSQL_DATABASE = os.getenv("MYSQL_DATABASE")

    if not MYSQL_USER or not MYSQL_PASSWORD or not MYSQL_HOST or not MYSQL_DATABASE:
        raise ValueError("Missing DATABASE_URL or the MYSQL_* database environment variables")

    return f"mysql+mysqlconnector://{MYSQL_USER}:{MYSQL_PASSWORD}@{MYSQL_HOST}:{MYSQL_PORT}/{MYSQL_DATABASE}"

def get_env(key: str, default: str = None, required: bool = False) -> str:
    value = os.getenv(key, default)
    if required and not value:
        raise ValueError(f"Missing required environment variable: {key}")
    return value

def get_allowed_origins() -> list[str]:
    raw = get_env("FRONTEND_ORIGIN", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

