"""Main URL mapping configuration file.

Include other URLConfs from external apps using method `include()`.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('storage/', include('server.apps.file_storage.urls')),
    path('admin/', admin.site.urls),
]
