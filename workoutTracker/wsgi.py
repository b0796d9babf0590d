"""WSGI config for workoutTracker.

Production servers (gunicorn, uWSGI) import `application` from here.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "workoutTracker.settings")

application = get_wsgi_application()

