"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("PULSE_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("PULSE_LOG_LEVEL", "INFO")

# Upstream APIs
REST_COUNTRIES_URL = os.getenv("PULSE_REST_COUNTRIES_URL", "https://restcountries.com/v3.1")
OPEN_METEO_URL = os.getenv("PULSE_OPEN_METEO_URL", "https://api.open-meteo.com/v1")
NEWSDATA_URL = os.getenv("PULSE_NEWSDATA_URL", "https://newsdata.io/api/1")
NEWSDATA_API_KEY = os.getenv("NEWSDATA_API_KEY", "")

API_TIMEOUT = float(os.getenv("PULSE_API_TIMEOUT", "10"))
API_RETRIES = int(os.getenv("PULSE_API_RETRIES", "1"))
MAX_CONCURRENT = int(os.getenv("PULSE_MAX_CONCURRENT", "20"))

# Cache
CACHE_TTL = float(os.getenv("PULSE_CACHE_TTL", str(15 * 60)))

# Server
API_HOST = os.getenv("PULSE_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("PULSE_API_PORT", "8000"))

# Dashboard
PULSE_API_URL = os.getenv("PULSE_API_URL", f"http://{API_HOST}:{API_PORT}")
