"""
Runtime configuration read from environment variables.
"""

import os


NHL_API_BASE_URL = os.getenv("NHL_API_BASE_URL", "https://api-web.nhle.com/v1")
NHL_API_TIMEOUT = float(os.getenv("NHL_API_TIMEOUT", "30.0"))

# Team analysed when a request doesn't name one
TARGET_TEAM = os.getenv("TARGET_TEAM", "MTL").upper()

N_SIMULATIONS = int(os.getenv("N_SIMULATIONS", "50000"))
SIM_WORKERS = int(os.getenv("SIM_WORKERS", "1"))

LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "America/Montreal")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
