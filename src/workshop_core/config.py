import os

# Kept so existing deployments that set it keep working; the RemoteStorage endpoint does not need it.
STEAM_API_KEY = os.getenv("STEAM_API_KEY", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))  # seconds
