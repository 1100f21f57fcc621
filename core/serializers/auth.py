from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    id = serializers.CharField()
    password = serializers.CharField()

    def validate_id(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Account id is required')
        return v


class SwitchRoleSerializer(serializers.Serializer):
    role = serializers.CharField()
