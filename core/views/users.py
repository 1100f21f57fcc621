"""
Endpoints of the ``/api/users`` handler group.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.account import AccountSerializer


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def me(request):
    """Return, or partially update, the signed-in account."""
    if request.method == 'GET':
        return Response(AccountSerializer(request.user).data)
    s = AccountSerializer(request.user, data=request.data, partial=True)
    s.is_valid(raise_exception=True)
    s.save()
    return Response(s.data)
