"""
Users — Auth URL Configuration

Endpoints: login, refresh, logout, me. The trailing slash is optional.

@file users/urls.py
"""

from django.urls import re_path

from .views import LoginView, LogoutView, MeView, TokenRefreshAPIView

app_name = 'auth'

urlpatterns = [
    re_path(r'^login/?$', LoginView.as_view(), name='login'),
    re_path(r'^refresh/?$', TokenRefreshAPIView.as_view(), name='token-refresh'),
    re_path(r'^logout/?$', LogoutView.as_view(), name='logout'),
    re_path(r'^me/?$', MeView.as_view(), name='me'),
]
