from django.urls import path

from core.views import users

urlpatterns = [
    path('me', users.me, name='users_me'),
]
