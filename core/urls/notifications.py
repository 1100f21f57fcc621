from django.urls import path

from core.views import notifications

urlpatterns = [
    path('', notifications.list_notifications, name='notifications_list'),
    path('<int:pk>/read', notifications.mark_read, name='notifications_read'),
]
