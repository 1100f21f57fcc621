"""
Authentication views for the ``/api/auth`` handler group.

Login exchanges an account id and password for a DRF token; the client
then sends it as ``Authorization: Bearer <token>``.  Switching roles only
moves ``active_role`` between roles the account already holds.
"""
from __future__ import annotations

import logging

from django.contrib.auth import authenticate
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from core.serializers.account import AccountSerializer
from core.serializers.auth import LoginSerializer, SwitchRoleSerializer

logger = logging.getLogger(__name__)


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    """Accepts ``id`` and ``password``; returns a token and the account."""
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data

    user = authenticate(request, id=vd['id'], password=vd['password'])
    if not user:
        logger.info('Failed login for %s', vd['id'])
        return Response({'msg': 'Invalid credentials'}, status=401)

    token, _ = Token.objects.get_or_create(user=user)
    return Response({'token': token.key, 'user': AccountSerializer(user).data})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    Token.objects.filter(user=request.user).delete()
    return Response({'ok': True})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def switch_role_view(request):
    s = SwitchRoleSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        request.user.switch_role(s.validated_data['role'])
    except DjangoValidationError as exc:
        return Response({'msg': 'Role not available', 'details': exc.message_dict}, status=400)
    return Response(AccountSerializer(request.user).data)
