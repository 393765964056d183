from django.contrib import admin
from .models import Artist, IsrcArtist, IsrcSong, Lpm, LpmArtist


class IsrcArtistInline(admin.TabularInline):
    model = IsrcArtist
    extra = 1
    autocomplete_fields = ['artist']


class LpmArtistInline(admin.TabularInline):
    model = LpmArtist
    extra = 1
    autocomplete_fields = ['artist']


@admin.register(Artist)
class ArtistAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']


@admin.register(IsrcSong)
class IsrcSongAdmin(admin.ModelAdmin):
    list_display = ['isrc', 'track_name', 'title', 'license', 'date', 'visibility', 'team', 'deleted_at']
    list_filter = ['visibility', 'team']
    search_fields = ['isrc', 'track_name', 'title', 'license']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [IsrcArtistInline]


@admin.register(Lpm)
class LpmAdmin(admin.ModelAdmin):
    list_display = ['product_title', 'product_id', 'product_type', 'label_name', 'original_release_date', 'visibility', 'team']
    list_filter = ['product_type', 'visibility', 'team']
    search_fields = ['product_title', 'product_id', 'label_name']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [LpmArtistInline]
