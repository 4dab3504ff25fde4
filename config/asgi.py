"""
ASGI config for the todolist service.

Served by any ASGI server (Uvicorn, Daphne):
    uvicorn config.asgi:application
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

application = get_asgi_application()
