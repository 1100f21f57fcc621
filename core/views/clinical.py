"""
Endpoints of the ``/api/clinical`` handler group.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from ..models import User
from ..permissions import IsClinicalRole
from ..serializers.account import AccountSerializer


@api_view(['GET'])
@permission_classes([IsClinicalRole])
def patients(request):
    """List active accounts that hold the patient role."""
    # roles is a JSON list; filter in Python so SQLite works too
    qs = User.objects.filter(is_active=True).order_by('id')
    return Response(AccountSerializer([u for u in qs if 'patient' in u.roles], many=True).data)
