# Initial migration for artists, ISRC songs and LPM products

from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


VISIBILITY_CHOICES = [
    ('EVERYONE', 'Everyone'),
    ('MANAGER_AND_ABOVE', 'Managers and above'),
    ('ADMIN', 'Admins only'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('api', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Artist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, help_text='Artist name as credited', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Artist',
                'verbose_name_plural': 'Artists',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='IsrcSong',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('isrc', models.CharField(blank=True, db_index=True, help_text='ISRC code (e.g., ROA231234567)', max_length=15)),
                ('track_name', models.CharField(blank=True, max_length=255)),
                ('title', models.CharField(blank=True, max_length=255)),
                ('license', models.CharField(blank=True, help_text='License holder or license type', max_length=255)),
                ('duration', models.CharField(blank=True, help_text='Track duration as delivered (e.g., 03:25)', max_length=20)),
                ('date', models.DateTimeField(blank=True, help_text='Release date of the recording', null=True)),
                ('visibility', models.CharField(choices=VISIBILITY_CHOICES, db_index=True, default='EVERYONE', max_length=20)),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('team', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='isrc_songs', to='api.team')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='isrc_songs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'ISRC Song',
                'verbose_name_plural': 'ISRC Songs',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='IsrcArtist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='isrc_credits', to='catalog.artist')),
                ('isrc_song', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='isrc_artists', to='catalog.isrcsong')),
            ],
            options={
                'unique_together': {('isrc_song', 'artist')},
            },
        ),
        migrations.AddField(
            model_name='isrcsong',
            name='artists',
            field=models.ManyToManyField(blank=True, related_name='isrc_songs', through='catalog.IsrcArtist', to='catalog.artist'),
        ),
        migrations.CreateModel(
            name='Lpm',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_id', models.CharField(blank=True, db_index=True, help_text='Label product id / catalogue number', max_length=100)),
                ('product_title', models.CharField(blank=True, max_length=255)),
                ('product_type', models.CharField(blank=True, help_text='Product type (Single, EP, Album...)', max_length=50)),
                ('product_version', models.CharField(blank=True, max_length=100)),
                ('label_name', models.CharField(blank=True, max_length=255)),
                ('original_release_date', models.DateTimeField(blank=True, null=True)),
                ('visibility', models.CharField(choices=VISIBILITY_CHOICES, db_index=True, default='EVERYONE', max_length=20)),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('team', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='lpm_entries', to='api.team')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lpm_entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'LPM Entry',
                'verbose_name_plural': 'LPM Entries',
                'ordering': ['product_type', 'id'],
            },
        ),
        migrations.CreateModel(
            name='LpmArtist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('artist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lpm_credits', to='catalog.artist')),
                ('lpm', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='lpm_artists', to='catalog.lpm')),
            ],
            options={
                'unique_together': {('lpm', 'artist')},
            },
        ),
        migrations.AddField(
            model_name='lpm',
            name='artists',
            field=models.ManyToManyField(blank=True, related_name='lpm_entries', through='catalog.LpmArtist', to='catalog.artist'),
        ),
    ]
