import os

# Base defaults (seconds)
_DEFAULT_TIMEOUT = 60
_DEFAULT_KEEPALIVE = 5
_DEFAULT_PORT = 8787

# Optional env overrides
_timeout = int(os.getenv("GUNICORN_TIMEOUT", str(_DEFAULT_TIMEOUT)))
_keepalive = int(os.getenv("GUNICORN_KEEPALIVE", str(_DEFAULT_KEEPALIVE)))
_port = int(os.getenv("PORT", str(_DEFAULT_PORT)))

# Serve with: gunicorn -c gunicorn.conf.py app:app
bind = f"0.0.0.0:{_port}"
# Worker killed after this many seconds of no progress; one OpenAI call per request
timeout = _timeout
graceful_timeout = _timeout
keepalive = _keepalive
workers = int(os.getenv("GUNICORN_WORKERS", "2"))
worker_class = "sync"

print(f"GUNICORN_CONFIG_LOADED bind={bind} timeout={timeout} keepalive={keepalive} workers={workers}")
