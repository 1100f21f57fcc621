from django.urls import path

from core.views import clinical

urlpatterns = [
    path('patients', clinical.patients, name='clinical_patients'),
]
