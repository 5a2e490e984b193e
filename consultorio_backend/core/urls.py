"""Core App URLs - Authentication, Navigation, Users & Health.

Prefix: /api/
Routes:
    GET    /api/health/        - Health check (no auth)
    POST   /api/auth/login/    - JWT token obtain with user/role info
    POST   /api/auth/refresh/  - JWT token refresh
    POST   /api/auth/logout/   - Blacklist refresh token
    GET    /api/auth/me/       - Current user info (requires auth)
    GET    /api/navigation/    - Pages visible for the current role
    GET/POST   /api/users/       - List/Create users (admin)
    GET/DELETE /api/users/<pk>/  - Retrieve/Delete user (admin)
"""

from django.urls import path

from consultorio_backend.core.views import (
    health,
    LoginView,
    LogoutView,
    MeView,
    NavigationView,
    RefreshView,
    UserDetailView,
    UserListCreateView,
)

app_name = 'core'

urlpatterns = [
    # Health check
    path('health/', health, name='health'),

    # JWT Authentication
    path('auth/login/', LoginView.as_view(), name='login'),
    path('auth/refresh/', RefreshView.as_view(), name='refresh'),
    path('auth/logout/', LogoutView.as_view(), name='logout'),
    path('auth/me/', MeView.as_view(), name='me'),

    path('navigation/', NavigationView.as_view(), name='navigation'),

    # User management
    path('users/', UserListCreateView.as_view(), name='user-list'),
    path('users/<int:pk>/', UserDetailView.as_view(), name='user-detail'),
]
