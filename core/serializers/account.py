from rest_framework import serializers

from core.models import User


class AccountSerializer(serializers.ModelSerializer):
    activeRole = serializers.CharField(source='active_role', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'name', 'phone', 'email', 'roles', 'activeRole']
        read_only_fields = ['id', 'roles']
