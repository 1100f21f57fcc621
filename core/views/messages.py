"""
Direct messages between accounts (``/api/messages``).
"""
from __future__ import annotations

from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..models import Message
from ..serializers.messaging import MessageSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def inbox(request):
    """Return messages addressed to the current account, newest first."""
    qs = Message.objects.filter(recipient=request.user).select_related('sender')
    return Response(MessageSerializer(qs, many=True).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def send(request):
    s = MessageSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    s.save(sender=request.user)
    return Response(s.data, status=201)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def mark_read(request, pk: int):
    msg = get_object_or_404(Message, pk=pk, recipient=request.user)
    if msg.read_at is None:
        msg.read_at = timezone.now()
        msg.save(update_fields=['read_at'])
    return Response(MessageSerializer(msg).data)
