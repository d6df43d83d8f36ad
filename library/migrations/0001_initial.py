# Generated migration for the Media model

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import library.validators
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Media',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=100)),
                ('description', models.TextField(blank=True, default='', validators=[django.core.validators.MaxLengthValidator(500, 'Description cannot exceed 500 characters')])),
                ('alt_text', models.CharField(blank=True, default='', max_length=200)),
                ('filename', models.CharField(max_length=255)),
                ('original_name', models.CharField(max_length=255)),
                ('file_size', models.PositiveBigIntegerField(help_text='Size in bytes')),
                ('mime_type', models.CharField(choices=[('image/jpeg', 'JPEG image'), ('image/png', 'PNG image'), ('image/gif', 'GIF image'), ('image/webp', 'WebP image'), ('image/svg+xml', 'SVG image'), ('video/mp4', 'MP4 video'), ('video/webm', 'WebM video'), ('audio/mpeg', 'MPEG audio'), ('audio/wav', 'WAV audio'), ('application/pdf', 'PDF document')], max_length=50)),
                ('file_extension', models.CharField(max_length=20)),
                ('url', models.CharField(max_length=2048)),
                ('upload_path', models.CharField(max_length=1024)),
                ('storage_service', models.CharField(choices=[('local', 'Local'), ('s3', 'Amazon S3'), ('cloudinary', 'Cloudinary'), ('azure', 'Azure')], default='local', max_length=20)),
                ('image_width', models.IntegerField(blank=True, null=True)),
                ('image_height', models.IntegerField(blank=True, null=True)),
                ('image_format', models.CharField(blank=True, max_length=50, null=True)),
                ('image_color_space', models.CharField(blank=True, max_length=50, null=True)),
                ('image_has_alpha', models.BooleanField(default=False)),
                ('image_orientation', models.IntegerField(default=1)),
                ('thumbnails', models.JSONField(blank=True, default=list, validators=[library.validators.validate_thumbnails])),
                ('media_type', models.CharField(choices=[('image', 'Image'), ('video', 'Video'), ('audio', 'Audio'), ('document', 'Document'), ('other', 'Other')], max_length=20)),
                ('category', models.CharField(choices=[('profile', 'Profile'), ('content', 'Content'), ('gallery', 'Gallery'), ('hero', 'Hero'), ('icon', 'Icon'), ('banner', 'Banner'), ('other', 'Other')], default='other', max_length=20)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('related_content', models.JSONField(blank=True, default=list, help_text='[{content_type, content_id}]', validators=[library.validators.validate_related_content])),
                ('is_active', models.BooleanField(default=True)),
                ('is_public', models.BooleanField(default=True)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('approved', 'Approved'), ('rejected', 'Rejected'), ('archived', 'Archived')], default='pending', max_length=20)),
                ('seo_keywords', models.JSONField(blank=True, default=list)),
                ('seo_canonical_url', models.CharField(blank=True, default='', max_length=2048)),
                ('seo_no_index', models.BooleanField(default=False)),
                ('license', models.CharField(choices=[('public-domain', 'Public domain'), ('cc-by', 'CC BY'), ('cc-by-sa', 'CC BY-SA'), ('proprietary', 'Proprietary'), ('other', 'Other')], default='proprietary', max_length=20)),
                ('copyright_holder', models.CharField(blank=True, default='', max_length=255)),
                ('copyright_year', models.PositiveIntegerField(blank=True, null=True)),
                ('views', models.PositiveIntegerField(default=0)),
                ('downloads', models.PositiveIntegerField(default=0)),
                ('shares', models.PositiveIntegerField(default=0)),
                ('uploaded_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('deleted_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('uploaded_by', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='uploaded_media', to=settings.AUTH_USER_MODEL)),
                ('last_modified_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('deleted_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'media',
                'ordering': ['-created_at'],
                'verbose_name_plural': 'media',
                'indexes': [
                    models.Index(fields=['uploaded_by'], name='media_uploade_6c3e2f_idx'),
                    models.Index(fields=['media_type'], name='media_media_t_0d9b41_idx'),
                    models.Index(fields=['category'], name='media_categor_8f1a27_idx'),
                    models.Index(fields=['is_active', 'is_public'], name='media_is_acti_4b7e90_idx'),
                    models.Index(fields=['status'], name='media_status_a2c5d8_idx'),
                    models.Index(fields=['-created_at'], name='media_created_e71f36_idx'),
                ],
            },
        ),
    ]
