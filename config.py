import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-key-change-this')
    PORT = _env_int('PORT', 5000)

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_FORMAT = os.getenv('LOG_FORMAT', 'json').strip().lower()

    # Ranking
    SCORE_MIN_GAP = _env_int('SCORE_MIN_GAP', 2)
    SCORE_MAX_GAP = _env_int('SCORE_MAX_GAP', 7)
    TOP_MATCH_COUNT = _env_int('TOP_MATCH_COUNT', 3)
