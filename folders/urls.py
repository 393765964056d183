from django.urls import path

from .views import FolderDetailView

urlpatterns = [
    path('folders/<uuid:folder_id>/', FolderDetailView.as_view(), name='folder-detail'),
    path(
        'teams/<int:team_id>/folders/<uuid:folder_id>/',
        FolderDetailView.as_view(),
        name='team-folder-detail'
    ),
]
