# Gunicorn configuration for the doctor listing service.
# Run with: gunicorn -c gunicorn.conf.py doctorlisting.app:app
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from doctorlisting.core.config import get_settings  # noqa: E402

_settings = get_settings()

# HOST / PORT come from the same settings uvicorn uses in startup.py
bind = f"{_settings.host}:{_settings.port}"

# One Motor client per worker; scale with WEB_CONCURRENCY
workers = int(os.environ.get("WEB_CONCURRENCY", 1))
worker_class = "uvicorn.workers.UvicornWorker"
timeout = 30
graceful_timeout = 10

max_requests = 1000
max_requests_jitter = 50

accesslog = "-"
errorlog = "-"
loglevel = _settings.logging.level.lower()

proc_name = _settings.app_name.lower().replace(" ", "-")
