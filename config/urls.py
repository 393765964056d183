"""
URL configuration for config project.

Personal listings live at /api/v1/<resource>/, team listings at
/api/v1/teams/<team_id>/<resource>/.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path('admin/', admin.site.urls),

    # Documents & Files API
    path('api/v1/', include('documents.urls')),

    # Folders API
    path('api/v1/', include('folders.urls')),

    # ISRC & LPM API
    path('api/v1/', include('catalog.urls')),
]

# Serve media files in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
