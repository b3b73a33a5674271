"""Top-level package for Django configuration.

Contains the settings modules for each environment and the WSGI, ASGI
and Celery entry points of the heater rental service.
"""

# Import the Celery application as soon as Django starts so that
# shared tasks bind to it.
from .celery import app as celery_app  # noqa: F401
