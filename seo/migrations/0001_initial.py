# Generated migration for the SEO model

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('content', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SEO',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('page_title', models.CharField(help_text='Title shown in the browser tab and search results', max_length=255)),
                ('page_slug', models.CharField(help_text='URL-friendly slug for the page', max_length=300, unique=True)),
                ('page_type', models.CharField(choices=[('homepage', 'Homepage'), ('service', 'Service'), ('blog', 'Blog'), ('product', 'Product'), ('custom', 'Custom'), ('other', 'Other')], default='custom', max_length=20)),
                ('meta_description', models.CharField(help_text='Shown in search results', max_length=160)),
                ('meta_keywords', models.JSONField(blank=True, default=list)),
                ('meta_author', models.CharField(blank=True, default='', max_length=255)),
                ('og_title', models.CharField(blank=True, default='', max_length=255)),
                ('og_description', models.CharField(blank=True, default='', max_length=160)),
                ('og_image', models.CharField(blank=True, default='', max_length=2048)),
                ('og_type', models.CharField(choices=[('website', 'Website'), ('article', 'Article'), ('product', 'Product'), ('business.business', 'Business'), ('other', 'Other')], default='website', max_length=30)),
                ('twitter_card', models.CharField(choices=[('summary', 'Summary'), ('summary_large_image', 'Summary with large image'), ('app', 'App'), ('player', 'Player')], default='summary_large_image', max_length=30)),
                ('twitter_title', models.CharField(blank=True, default='', max_length=255)),
                ('twitter_description', models.CharField(blank=True, default='', max_length=200)),
                ('twitter_image', models.CharField(blank=True, default='', max_length=2048)),
                ('schema_markup', models.JSONField(blank=True, null=True)),
                ('canonical_url', models.CharField(blank=True, default='', max_length=2048)),
                ('robots_meta', models.CharField(choices=[('index, follow', 'index, follow'), ('noindex, follow', 'noindex, follow'), ('index, nofollow', 'index, nofollow'), ('noindex, nofollow', 'noindex, nofollow')], default='index, follow', max_length=30)),
                ('alternate_languages', models.JSONField(blank=True, default=list)),
                ('include_in_sitemap', models.BooleanField(default=True)),
                ('sitemap_priority', models.FloatField(default=0.5, validators=[django.core.validators.MinValueValidator(0.0), django.core.validators.MaxValueValidator(1.0)])),
                ('sitemap_changefreq', models.CharField(choices=[('always', 'Always'), ('hourly', 'Hourly'), ('daily', 'Daily'), ('weekly', 'Weekly'), ('monthly', 'Monthly'), ('yearly', 'Yearly'), ('never', 'Never')], default='weekly', max_length=10)),
                ('focus_keyword', models.CharField(blank=True, default='', max_length=255)),
                ('readable_slug', models.CharField(blank=True, default='', max_length=300)),
                ('breadcrumbs', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('associated_page', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='seo_entries', to='content.page')),
            ],
            options={
                'db_table': 'seos',
                'ordering': ['-created_at'],
                'verbose_name': 'SEO entry',
                'verbose_name_plural': 'SEO entries',
                'indexes': [
                    models.Index(fields=['page_slug'], name='seos_page_sl_4d2a8c_idx'),
                    models.Index(fields=['page_type'], name='seos_page_ty_91e0b5_idx'),
                    models.Index(fields=['include_in_sitemap'], name='seos_include_7f3c16_idx'),
                    models.Index(fields=['-created_at'], name='seos_created_b05e4a_idx'),
                ],
            },
        ),
    ]
