"""URL configuration for file_storage app."""

from django.urls import path

from server.apps.file_storage import views

app_name = 'storage'

urlpatterns = [
    path('', views.get_resource, name='get'),
]
