from django.urls import path

from .views import IsrcListView, LpmListView

urlpatterns = [
    path('isrc/', IsrcListView.as_view(), name='isrc-list'),
    path('teams/<int:team_id>/isrc/', IsrcListView.as_view(), name='team-isrc-list'),
    path('lpm/', LpmListView.as_view(), name='lpm-list'),
    path('teams/<int:team_id>/lpm/', LpmListView.as_view(), name='team-lpm-list'),
]
