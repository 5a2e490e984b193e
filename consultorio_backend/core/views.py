"""Core app views.

Contains:
- health: Health check endpoint
- LoginView / RefreshView / LogoutView: JWT session handling
- MeView / NavigationView: current identity and the pages it may open
- UserListCreateView / UserDetailView: user management (admin only)
"""

import logging

from django.db import connection
from django.http import JsonResponse

from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from consultorio_backend.core.models import User
from consultorio_backend.core.navigation import pages_for_role
from consultorio_backend.core.permissions import UserAdminPermission
from consultorio_backend.core.serializers import (
    LoginSerializer,
    RefreshSerializer,
    RoleSerializer,
    UserCreateSerializer,
    UserMeSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


def health(request):
    """Health check endpoint - no authentication required."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except Exception as exc:
        logger.error('Health check failed: %s', exc)
        return JsonResponse({'status': 'error', 'detail': str(exc)}, status=503)

    return JsonResponse({'status': 'ok'})


class LoginView(APIView):
    """Obtain JWT access and refresh tokens.

    POST /api/auth/login/
    Body: {"username": "...", "password": "..."}
    Returns: {"user": {...}, "pages": [...], "access": "...", "refresh": "..."}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data, context={'request': request})
        if not serializer.is_valid():
            logger.info('Login failed for username=%r', request.data.get('username'))
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = serializer.validated_data['user']

        refresh = RefreshToken.for_user(user)
        role = getattr(user, 'role', None)
        refresh['role'] = role.name if role else None
        access = refresh.access_token

        logger.info('User %s logged in (role=%s)', user.username, user.role_name)
        return Response(
            {
                'user': {
                    'id': user.id,
                    'username': user.username,
                    'role': RoleSerializer(role).data if role else None,
                },
                'pages': pages_for_role(user.role_name),
                'access': str(access),
                'refresh': str(refresh),
            },
            status=status.HTTP_200_OK,
        )


class RefreshView(APIView):
    """Refresh JWT access token.

    POST /api/auth/refresh/
    Body: {"refresh": "..."}
    Returns: {"access": "..."}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        refresh = RefreshToken(serializer.validated_data['refresh'])

        return Response(
            {
                'access': str(refresh.access_token),
            },
            status=status.HTTP_200_OK,
        )


class LogoutView(APIView):
    """End the session by blacklisting the refresh token.

    POST /api/auth/logout/
    Body: {"refresh": "..."}
    """

    permission_classes = [IsAuthenticated]

    def post(self, request, *args, **kwargs):
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            RefreshToken(serializer.validated_data['refresh']).blacklist()
        except TokenError as exc:
            return Response({'detail': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        logger.info('User %s logged out', request.user.username)
        return Response(status=status.HTTP_205_RESET_CONTENT)


class MeView(APIView):
    """Get current authenticated user info.

    GET /api/auth/me/
    Returns: {"id": ..., "username": "...", "role": {...}, "pages": [...]}
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        serializer = UserMeSerializer(request.user)
        return Response(serializer.data, status=status.HTTP_200_OK)


class NavigationView(APIView):
    """GET /api/navigation/ - pages the caller may open, in display order."""

    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        return Response({'pages': pages_for_role(request.user.role_name)})


class UserListCreateView(generics.ListCreateAPIView):
    """List all users or create a new one (admin only)."""

    permission_classes = [UserAdminPermission]

    def get_queryset(self):
        return User.objects.select_related('role').all()

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return UserCreateSerializer
        return UserSerializer

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        user = write_serializer.save()
        logger.info('User %s created by %s (role=%s)', user.username, request.user.username, user.role_name)

        read_serializer = UserSerializer(user, context={'request': request})
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class UserDetailView(generics.RetrieveDestroyAPIView):
    """Retrieve or delete a user (admin only).

    The logged-in admin cannot delete their own account.
    """

    permission_classes = [UserAdminPermission]
    serializer_class = UserSerializer

    def get_queryset(self):
        return User.objects.select_related('role').all()

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()
        if user.pk == request.user.pk:
            return Response(
                {'detail': 'You cannot delete the user you are logged in as.'},
                status=status.HTTP_400_BAD_REQUEST,
            )
        username = user.username
        user.delete()
        logger.info('User %s deleted by %s', username, request.user.username)
        return Response(status=status.HTTP_204_NO_CONTENT)
