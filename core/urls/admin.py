from django.urls import path

from core.views import accounts_admin

urlpatterns = [
    path('users', accounts_admin.list_users, name='admin_users'),
]
