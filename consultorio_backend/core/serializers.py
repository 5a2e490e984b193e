"""Serializers for the core app.

Contains serializers for User, Role and the authentication endpoints.
Follows the Read/Write serializer pattern.
"""

from rest_framework import serializers

from consultorio_backend.core.models import Role, User
from consultorio_backend.core.navigation import pages_for_role


# -----------------------------------------------------------------------------
# Role Serializers
# -----------------------------------------------------------------------------


class RoleSerializer(serializers.ModelSerializer):
    """Read-only serializer for Role model."""

    class Meta:
        model = Role
        fields = ['id', 'name', 'label']
        read_only_fields = fields


# -----------------------------------------------------------------------------
# User Serializers
# -----------------------------------------------------------------------------


class UserSerializer(serializers.ModelSerializer):
    """Read-only serializer for User model with nested role."""

    role = RoleSerializer(read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'is_active',
            'role',
            'date_joined',
            'last_login',
        ]
        read_only_fields = fields


class UserCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating new users (admin only).

    The role is given by name (``admin``, ``dentist``, ``receptionist``).
    Username uniqueness is enforced by the model's unique constraint.
    """

    role = serializers.SlugRelatedField(
        slug_field='name',
        queryset=Role.objects.all(),
    )
    password = serializers.CharField(write_only=True, required=True, min_length=8, trim_whitespace=False)

    class Meta:
        model = User
        fields = [
            'username',
            'password',
            'role',
        ]

    def validate_username(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('username is required.')
        return value

    def create(self, validated_data):
        """Create user with hashed password."""
        password = validated_data.pop('password')
        return User.objects.create_user(
            password=password,
            **validated_data,
        )


# -----------------------------------------------------------------------------
# Authentication Serializers
# -----------------------------------------------------------------------------


class LoginSerializer(serializers.Serializer):
    """Serializer for user login.

    Validates credentials and returns user with role info. Every failure
    produces the same generic message.
    """

    username = serializers.CharField(required=True, trim_whitespace=False)
    password = serializers.CharField(required=True, write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        from django.contrib.auth import authenticate

        username = attrs.get('username')
        password = attrs.get('password')

        if not username or not password:
            raise serializers.ValidationError('Username and password are required.')

        user = authenticate(
            request=self.context.get('request'),
            username=username,
            password=password,
        )

        if user is None or not user.is_active:
            raise serializers.ValidationError('Invalid credentials.')

        attrs['user'] = user
        return attrs


class RefreshSerializer(serializers.Serializer):
    """Serializer for token refresh.

    Validates refresh token and returns new access token.
    """

    refresh = serializers.CharField(required=True)

    def validate_refresh(self, value):
        from rest_framework_simplejwt.tokens import RefreshToken
        from rest_framework_simplejwt.exceptions import TokenError

        try:
            RefreshToken(value)
        except TokenError as e:
            raise serializers.ValidationError(f'Invalid or expired refresh token: {str(e)}')
        return value


class UserMeSerializer(serializers.ModelSerializer):
    """Serializer for the /auth/me/ endpoint.

    Returns current user info with role details and the visible pages.
    """

    role = RoleSerializer(read_only=True)
    pages = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'role',
            'pages',
        ]
        read_only_fields = fields

    def get_pages(self, obj):
        return pages_for_role(obj.role_name)
