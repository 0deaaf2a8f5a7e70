# skilllink/api/__init__.py
# This file makes the api directory a Python package.

from . import admin
from . import auth
from . import requests
from . import sessions
from . import skills

__all__ = [
    "auth",
    "admin",
    "requests",
    "sessions",
    "skills",
]
