import os

HOST = os.environ.get("ITEMSTORE_HOST", "0.0.0.0")
PORT = int(os.environ.get("ITEMSTORE_PORT", "8080"))
LOG_LEVEL = os.environ.get("ITEMSTORE_LOG_LEVEL", "INFO").upper()
