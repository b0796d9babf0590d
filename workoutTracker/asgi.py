"""ASGI config for workoutTracker.

ASGI servers (uvicorn, daphne) import `application` from here.
"""

from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "workoutTracker.settings")

application = get_asgi_application()

