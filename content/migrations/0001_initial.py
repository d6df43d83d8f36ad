# Generated migration for Tag, Page and PageVersion models

import content.models
import content.validators
import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Tag',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True)),
                ('slug', models.CharField(max_length=255, unique=True)),
                ('description', models.TextField(blank=True, default='', validators=[django.core.validators.MaxLengthValidator(500)])),
                ('color', models.CharField(default='#000000', max_length=20)),
                ('icon', models.CharField(blank=True, default='', max_length=255)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'tags',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['slug'], name='tags_slug_3e1f0a_idx'),
                    models.Index(fields=['is_active'], name='tags_is_acti_7c2d44_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Page',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(db_index=True, max_length=200)),
                ('slug', models.CharField(max_length=300, unique=True, validators=[content.validators.validate_page_slug])),
                ('content', models.TextField()),
                ('excerpt', models.TextField(blank=True, default='', validators=[django.core.validators.MaxLengthValidator(500, 'Excerpt cannot be more than 500 characters')])),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('published', 'Published'), ('scheduled', 'Scheduled'), ('archived', 'Archived')], db_index=True, default='draft', max_length=20)),
                ('published_at', models.DateTimeField(blank=True, null=True)),
                ('scheduled_for', models.DateTimeField(blank=True, null=True)),
                ('page_type', models.CharField(choices=[('standard', 'Standard'), ('landing', 'Landing'), ('service', 'Service'), ('product', 'Product'), ('blog', 'Blog'), ('contact', 'Contact'), ('testimonial', 'Testimonial'), ('faq', 'FAQ'), ('custom', 'Custom')], db_index=True, default='standard', max_length=20)),
                ('sections', models.JSONField(blank=True, default=list, validators=[content.validators.validate_sections])),
                ('seo_meta_title', models.CharField(blank=True, default='', max_length=60)),
                ('seo_meta_description', models.CharField(blank=True, default='', max_length=160)),
                ('seo_meta_keywords', models.JSONField(blank=True, default=list)),
                ('seo_meta_image', models.CharField(blank=True, default='', max_length=2048)),
                ('seo_canonical_url', models.CharField(blank=True, default='', max_length=2048)),
                ('seo_og_title', models.CharField(blank=True, default='', max_length=255)),
                ('seo_og_description', models.TextField(blank=True, default='')),
                ('seo_og_image', models.CharField(blank=True, default='', max_length=2048)),
                ('seo_og_type', models.CharField(default='website', max_length=50)),
                ('seo_robots_index', models.BooleanField(default=True)),
                ('seo_robots_follow', models.BooleanField(default=True)),
                ('seo_structured_data', models.JSONField(blank=True, null=True)),
                ('template', models.CharField(choices=[('default', 'Default'), ('blank', 'Blank'), ('sidebar', 'Sidebar'), ('fullwidth', 'Full width'), ('landing', 'Landing'), ('portfolio', 'Portfolio'), ('documentation', 'Documentation'), ('custom', 'Custom')], default='default', max_length=20)),
                ('header_visible', models.BooleanField(default=True)),
                ('footer_visible', models.BooleanField(default=True)),
                ('sidebar_visible', models.BooleanField(default=False)),
                ('custom_header_html', models.TextField(blank=True, default='')),
                ('custom_footer_html', models.TextField(blank=True, default='')),
                ('custom_css', models.TextField(blank=True, default='')),
                ('custom_js', models.TextField(blank=True, default='')),
                ('is_public', models.BooleanField(default=True)),
                ('password_protected', models.BooleanField(default=False)),
                ('access_password', models.CharField(blank=True, max_length=128, null=True)),
                ('allowed_roles', models.JSONField(blank=True, default=content.models.default_access_roles, validators=[content.validators.ChoiceListValidator(['admin', 'editor', 'author', 'subscriber', 'guest'])])),
                ('geo_restrictions_enabled', models.BooleanField(default=False)),
                ('allowed_countries', models.JSONField(blank=True, default=list)),
                ('blocked_countries', models.JSONField(blank=True, default=list)),
                ('page_views', models.PositiveIntegerField(default=0)),
                ('unique_visitors', models.PositiveIntegerField(default=0)),
                ('bounce_rate', models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)])),
                ('average_time_on_page', models.FloatField(default=0)),
                ('conversion_rate', models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)])),
                ('conversion_count', models.PositiveIntegerField(default=0)),
                ('tracking_code', models.TextField(blank=True, default='')),
                ('ga_page_id', models.CharField(blank=True, default='', max_length=255)),
                ('last_analytics_update', models.DateTimeField(blank=True, null=True)),
                ('enable_comments', models.BooleanField(default=False)),
                ('comment_moderation', models.BooleanField(default=True)),
                ('enable_rating', models.BooleanField(default=False)),
                ('average_rating', models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(5)])),
                ('rating_count', models.PositiveIntegerField(default=0)),
                ('enable_social_sharing', models.BooleanField(default=True)),
                ('tags', models.JSONField(blank=True, default=list)),
                ('categories', models.JSONField(blank=True, default=list, help_text='Category identifiers')),
                ('enable_versioning', models.BooleanField(default=True)),
                ('current_version', models.PositiveIntegerField(default=1)),
                ('featured_image', models.CharField(blank=True, default='', max_length=2048)),
                ('gallery', models.JSONField(blank=True, default=list)),
                ('attachments', models.JSONField(blank=True, default=list, help_text='[{filename, url, type, uploaded_at}]')),
                ('enable_cache', models.BooleanField(default=True)),
                ('cache_duration', models.PositiveIntegerField(default=3600, help_text='Seconds')),
                ('lazy_load_images', models.BooleanField(default=True)),
                ('minify_css', models.BooleanField(default=True)),
                ('minify_js', models.BooleanField(default=True)),
                ('compression_enabled', models.BooleanField(default=True)),
                ('submitted_at', models.DateTimeField(blank=True, null=True)),
                ('approved_at', models.DateTimeField(blank=True, null=True)),
                ('review_notes', models.TextField(blank=True, default='')),
                ('requires_approval', models.BooleanField(default=True)),
                ('page_color', models.CharField(blank=True, default='', max_length=20)),
                ('icon', models.CharField(blank=True, default='', max_length=255)),
                ('banner', models.CharField(blank=True, default='', max_length=2048)),
                ('display_order', models.IntegerField(default=0)),
                ('is_home_page', models.BooleanField(default=False)),
                ('is_sitemap', models.BooleanField(default=False)),
                ('custom_metadata', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('updated_at', models.DateTimeField(auto_now=True, db_index=True)),
                ('author', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='authored_pages', to=settings.AUTH_USER_MODEL)),
                ('submitted_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('approved_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('last_modified_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('parent_page', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='child_pages', to='content.page')),
                ('related_pages', models.ManyToManyField(blank=True, related_name='related_from', to='content.page')),
                ('restricted_users', models.ManyToManyField(blank=True, related_name='restricted_pages', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'pages',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', '-published_at'], name='pages_status_9a41b2_idx'),
                    models.Index(fields=['author', '-created_at'], name='pages_author__5d0c7e_idx'),
                    models.Index(fields=['page_type'], name='pages_page_ty_1b6f93_idx'),
                    models.Index(fields=['parent_page'], name='pages_parent__e2a8d1_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PageVersion',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('version_number', models.PositiveIntegerField()),
                ('title', models.CharField(max_length=200)),
                ('content', models.TextField(blank=True)),
                ('changes', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('author', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('page', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='version_history', to='content.page')),
            ],
            options={
                'db_table': 'page_versions',
                'ordering': ['version_number'],
                'unique_together': {('page', 'version_number')},
            },
        ),
    ]
