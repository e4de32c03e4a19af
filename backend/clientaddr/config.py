import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"
    PROXY_FIX_X_FOR = int(os.environ.get("PROXY_FIX_X_FOR", "1"))
    # Header set by the front proxy with the validated client IP; empty disables it
    REAL_IP_HEADER = os.environ.get("REAL_IP_HEADER", "X-Real-IP").strip()

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
