import os

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"


def _int_env(name, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Database URL (required)
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL")

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,              # Max connections in pool per worker
        'pool_recycle': 3600,         # Recycle connections after 1 hour
        'pool_pre_ping': True,        # Verify connections before using
        'max_overflow': 5,
        'pool_timeout': 30,
    }

    # Days between scheduling and the pickup date
    PICKUP_DATE_OFFSET_DAYS = _int_env("PICKUP_DATE_OFFSET_DAYS", 3)

    # Address search used by the pickup address dialog
    GEOCODER_URL = os.environ.get("GEOCODER_URL", NOMINATIM_SEARCH_URL)
    GEOCODER_COUNTRY_CODES = os.environ.get("GEOCODER_COUNTRY_CODES", "IN")
