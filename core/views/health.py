from django.http import JsonResponse
from django.utils import timezone

from core.fallback import GET_LIKE, FallbackConfig, api_miss


def ping(request):
    # Liveness only: must not touch the database
    if request.method not in GET_LIKE:
        return api_miss(request, FallbackConfig.from_settings()).response
    return JsonResponse({'status': 'ok', 'time': timezone.now().isoformat()})
