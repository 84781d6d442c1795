# Serverless entry point: the platform serves the WSGI `app` at /api/generate.
from whisperer.serverless import app  # noqa: F401
