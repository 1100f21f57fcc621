from django.http import JsonResponse
from rest_framework.views import exception_handler as drf_exception_handler


class BodyDecodeError(ValueError):
    """Raised when a request body cannot be decoded for its content type."""


def error_response(msg, details=None, status=500):
    payload = {'msg': msg}
    if details is not None:
        payload['details'] = details
    return JsonResponse(payload, status=status)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        # not an APIException: let it reach ErrorBoundaryMiddleware
        return None
    # normalize response
    if isinstance(resp.data, dict) and set(resp.data) == {'detail'}:
        resp.data = {'msg': str(resp.data['detail'])}
    else:
        resp.data = {'msg': 'Invalid request', 'details': resp.data}
    return resp


def server_error(request, *args, **kwargs):
    return error_response('Server error', status=500)
