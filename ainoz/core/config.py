# centralized configuration loader
# runs load_dotenv() to read .env
# shared by the relayer process and by AinozClient.from_env()

import os
from dotenv import load_dotenv

load_dotenv()

# Client
RELAYER_URL = os.getenv("AINOZ_RELAYER_URL", "http://localhost:3001")
API_KEY = os.getenv("AINOZ_API_KEY") or None
TIMEOUT_MS = int(os.getenv("AINOZ_TIMEOUT_MS", "30000"))

# Relayer
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))
PROVIDER = os.getenv("PROVIDER", "stub")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# delay before each streamed chunk; 0 disables pacing
STREAM_INTERVAL_MS = int(os.getenv("STREAM_INTERVAL_MS", "50"))
