"""
Users — Views

Auth endpoints (login, refresh, logout, me) and the admin-only user
management ViewSet.

@file users/views.py
"""

import logging

from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView

from .models import User
from .permissions import IsAdminRole
from .serializers import (
    CustomTokenObtainPairSerializer,
    UserCreateSerializer,
    UserReadSerializer,
    UserUpdateSerializer,
)
from .services import UserService

logger = logging.getLogger('assettrack')


# ---------------------------------------------------------------------------
# Auth views
# ---------------------------------------------------------------------------

class LoginView(APIView):
    """POST /api/auth/login — Authenticate and obtain a JWT pair."""
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = CustomTokenObtainPairSerializer(
            data=request.data, context={'request': request},
        )
        serializer.is_valid(raise_exception=True)
        logger.info('User %s logged in', serializer.user.username)

        return Response({
            'success': True,
            'data': {
                'token': serializer.validated_data['access'],
                'refresh': serializer.validated_data['refresh'],
                'user': serializer.validated_data['user'],
            },
        })


class LogoutView(APIView):
    """POST /api/auth/logout — Blacklist the refresh token."""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        refresh_token = request.data.get('refresh')
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError:
                logger.info('Logout for %s with an already invalid refresh token', request.user.username)

        return Response({'success': True, 'message': 'Logged out.'}, status=status.HTTP_200_OK)


class TokenRefreshAPIView(TokenRefreshView):
    """POST /api/auth/refresh — Rotate refresh token."""
    pass


class MeView(APIView):
    """GET /api/auth/me — Return the current authenticated user."""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({
            'success': True,
            'data': UserReadSerializer(request.user).data,
        })


# ---------------------------------------------------------------------------
# User management ViewSet
# ---------------------------------------------------------------------------

class UserViewSet(viewsets.ModelViewSet):
    """
    CRUD for user accounts, addressed by username. Admin only.
    Deleting or demoting the last admin is rejected.
    """

    permission_classes = [IsAdminRole]
    lookup_field = 'username'
    lookup_value_regex = '[^/]+'
    filterset_fields = ['role', 'branch', 'is_active']
    search_fields = ['username', 'name', 'branch']
    ordering_fields = ['created_at', 'username', 'name']
    ordering = ['-created_at']
    http_method_names = ['get', 'post', 'put', 'patch', 'delete', 'head', 'options']

    def get_queryset(self):
        return User.objects.all()

    def get_serializer_class(self):
        if self.action == 'create':
            return UserCreateSerializer
        if self.action in ('update', 'partial_update'):
            return UserUpdateSerializer
        return UserReadSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserService.create_user(actor=request.user, **serializer.validated_data)
        return Response(
            {'success': True, 'data': UserReadSerializer(user).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        user = UserService.update_user(
            username=instance.username,
            actor=request.user,
            **serializer.validated_data,
        )
        return Response({'success': True, 'data': UserReadSerializer(user).data})

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        UserService.delete_user(username=instance.username, actor=request.user)
        return Response({'success': True, 'message': 'User deleted.'})
