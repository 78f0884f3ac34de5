"""Account serializers (HTTP input validation and output shaping)."""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.models import User, phone_validator

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=100, trim_whitespace=True)
    email = serializers.EmailField()
    phone = serializers.CharField(max_length=20, validators=[phone_validator])
    password = serializers.CharField(min_length=6, write_only=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class UpdateProfileSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=2, max_length=100, required=False)
    phone = serializers.CharField(
        max_length=20, validators=[phone_validator], required=False
    )
    current_password = serializers.CharField(write_only=True, required=False)
    new_password = serializers.CharField(min_length=6, write_only=True, required=False)

    def validate(self, attrs):
        if attrs.get("new_password") and not attrs.get("current_password"):
            raise serializers.ValidationError(
                {"current_password": "Current password is required to set a new password."}
            )
        return attrs


# ---------------------------------------------------------------------------
# Output Serializers
# ---------------------------------------------------------------------------


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name", "email", "phone", "created_at", "updated_at"]
        read_only_fields = fields


class AuthResultSerializer(serializers.Serializer):
    user = UserSerializer()
    access = serializers.CharField(source="tokens.access")
    refresh = serializers.CharField(source="tokens.refresh")
