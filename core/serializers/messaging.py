from rest_framework import serializers

from core.models import Message, Notification, User


class MessageSerializer(serializers.ModelSerializer):
    senderId = serializers.CharField(source='sender_id', read_only=True)
    senderName = serializers.CharField(source='sender.name', read_only=True)
    recipientId = serializers.PrimaryKeyRelatedField(source='recipient', queryset=User.objects.all())
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    readAt = serializers.DateTimeField(source='read_at', read_only=True)

    class Meta:
        model = Message
        fields = ['id', 'senderId', 'senderName', 'recipientId', 'body', 'createdAt', 'readAt']


class NotificationSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Notification
        fields = ['id', 'title', 'body', 'read', 'createdAt']
        read_only_fields = ['id', 'title', 'body', 'read']
