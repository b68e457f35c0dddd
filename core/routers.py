"""
Core — API Router

DefaultRouter variant whose routes match with or without a trailing
slash, so ``POST /api/auth/login`` and ``POST /api/auth/login/`` reach
the same view instead of a body-dropping APPEND_SLASH redirect.

@file core/routers.py
"""

from rest_framework.routers import DefaultRouter

OPTIONAL_SLASH = '/?'


class OptionalSlashRouter(DefaultRouter):
    # /api/ has its own directory view in config/urls.py
    include_root_view = False

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = OPTIONAL_SLASH
