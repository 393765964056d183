from django.urls import path

from .views import DocumentListView, FileListView

urlpatterns = [
    path('files/', FileListView.as_view(), name='file-list'),
    path('teams/<int:team_id>/files/', FileListView.as_view(), name='team-file-list'),
    path('documents/', DocumentListView.as_view(), name='document-list'),
    path('teams/<int:team_id>/documents/', DocumentListView.as_view(), name='team-document-list'),
]
