import os
from dotenv import load_dotenv

load_dotenv()

redis_host = os.getenv("REDIS_HOST", "redis")
redis_port = int(os.getenv("REDIS_PORT", "6379"))
redis_db = int(os.getenv("REDIS_DB", "0"))
redis_password = os.getenv("REDIS_PASSWORD") or None
redis_socket_timeout = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5"))
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
