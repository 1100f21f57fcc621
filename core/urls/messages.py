from django.urls import path

from core.views import messages

urlpatterns = [
    path('', messages.inbox, name='messages_inbox'),
    path('send', messages.send, name='messages_send'),
    path('<int:pk>/read', messages.mark_read, name='messages_read'),
]
