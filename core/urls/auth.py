from django.urls import path

from core.auth_views import login_view, logout_view, switch_role_view

urlpatterns = [
    path('login', login_view, name='login_view'),
    path('logout', logout_view, name='logout_view'),
    path('switch-role', switch_role_view, name='switch_role_view'),
]
