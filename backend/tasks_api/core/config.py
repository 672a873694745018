from dotenv import load_dotenv
import os

load_dotenv()  # Carrega variáveis do .env


def env_int(name: str, default: int) -> int:
    raw = str(os.getenv(name, "") or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


DATABASE_URL = os.getenv("DATABASE_URL")
DB_POOL_SIZE = env_int("DB_POOL_SIZE", 5)
DB_MAX_OVERFLOW = env_int("DB_MAX_OVERFLOW", 10)
DB_POOL_TIMEOUT = env_int("DB_POOL_TIMEOUT", 30)
DB_POOL_RECYCLE = env_int("DB_POOL_RECYCLE", 1800)
DB_BOOTSTRAP_MODE = os.getenv("DB_BOOTSTRAP_MODE", "background")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGIN_REGEX = os.getenv("CORS_ORIGIN_REGEX")

def parse_cors_origins(value: str):
    if not value:
        return []
    if value.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]
