"""
Endpoints of the ``/api/admin`` handler group.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from ..models import User
from ..permissions import IsAdminRole
from ..serializers.account import AccountSerializer


@api_view(['GET'])
@permission_classes([IsAdminRole])
def list_users(request):
    return Response(AccountSerializer(User.objects.order_by('id'), many=True).data)
