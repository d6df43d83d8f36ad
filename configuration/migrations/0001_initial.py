# Generated migration for the SiteSettings model

import configuration.models
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
            name='SiteSettings',
            fields=[
                ('id', models.PositiveSmallIntegerField(default=1, editable=False, primary_key=True, serialize=False)),
                ('contact_email', models.EmailField(blank=True, default='', help_text='Primary contact email address', max_length=254)),
                ('contact_phone', models.CharField(blank=True, default='', help_text='Primary phone number', max_length=50)),
                ('emergency_phone', models.CharField(blank=True, default='', max_length=50)),
                ('address_street', models.CharField(blank=True, default='', max_length=255)),
                ('address_city', models.CharField(blank=True, default='', max_length=100)),
                ('address_state', models.CharField(blank=True, default='', max_length=100)),
                ('address_postal_code', models.CharField(blank=True, default='', max_length=20)),
                ('address_country', models.CharField(default='Turkey', max_length=100)),
                ('working_hours', models.JSONField(blank=True, default=dict)),
                ('social_facebook', models.CharField(blank=True, default='', max_length=500)),
                ('social_twitter', models.CharField(blank=True, default='', max_length=500)),
                ('social_instagram', models.CharField(blank=True, default='', max_length=500)),
                ('social_linkedin', models.CharField(blank=True, default='', max_length=500)),
                ('social_youtube', models.CharField(blank=True, default='', max_length=500)),
                ('social_whatsapp', models.CharField(blank=True, default='', max_length=500)),
                ('site_title', models.CharField(help_text='Default site title for SEO', max_length=255)),
                ('site_description', models.CharField(help_text='Meta description for the homepage', max_length=160)),
                ('site_keywords', models.JSONField(blank=True, default=list)),
                ('google_analytics_id', models.CharField(blank=True, default='', help_text='UA-XXXXXXXXX-X or G-XXXXXXXXXX', max_length=50)),
                ('google_search_console_id', models.CharField(blank=True, default='', max_length=255)),
                ('bing_webmaster_id', models.CharField(blank=True, default='', max_length=255)),
                ('facebook_pixel_id', models.CharField(blank=True, default='', max_length=50)),
                ('twitter_handle', models.CharField(blank=True, default='', max_length=50)),
                ('og_image', models.CharField(blank=True, default='', max_length=2048)),
                ('sitemap_url', models.CharField(default='/sitemap.xml', max_length=255)),
                ('robots_txt', models.TextField(blank=True, default='')),
                ('enable_xml_sitemap', models.BooleanField(default=True)),
                ('canonical_url', models.CharField(blank=True, default='', max_length=2048)),
                ('theme', models.CharField(choices=[('light', 'Light'), ('dark', 'Dark'), ('auto', 'Auto')], default='light', max_length=10)),
                ('primary_color', models.CharField(default='#0066cc', max_length=20)),
                ('secondary_color', models.CharField(default='#00cc00', max_length=20)),
                ('accent_color', models.CharField(default='#ff6600', max_length=20)),
                ('logo', models.CharField(blank=True, default='', max_length=2048)),
                ('favicon', models.CharField(blank=True, default='', max_length=2048)),
                ('font_family', models.CharField(default='Inter, sans-serif', max_length=255)),
                ('heading_font_family', models.CharField(default='Poppins, sans-serif', max_length=255)),
                ('font_size', models.CharField(choices=[('small', 'Small'), ('medium', 'Medium'), ('large', 'Large')], default='medium', max_length=10)),
                ('enable_dark_mode', models.BooleanField(default=True)),
                ('enable_animations', models.BooleanField(default=True)),
                ('animation_duration', models.PositiveIntegerField(default=300, help_text='Milliseconds')),
                ('breakpoint_mobile', models.PositiveIntegerField(default=480)),
                ('breakpoint_tablet', models.PositiveIntegerField(default=768)),
                ('breakpoint_desktop', models.PositiveIntegerField(default=1024)),
                ('breakpoint_wide', models.PositiveIntegerField(default=1440)),
                ('enable_ssl', models.BooleanField(default=True)),
                ('enable_two_factor', models.BooleanField(default=True, help_text='Require 2FA for admin accounts')),
                ('password_min_length', models.IntegerField(default=8)),
                ('password_require_numbers', models.BooleanField(default=True)),
                ('password_require_special_chars', models.BooleanField(default=True)),
                ('password_require_uppercase', models.BooleanField(default=True)),
                ('session_timeout', models.PositiveIntegerField(default=3600, help_text='Seconds')),
                ('enable_rate_limiting', models.BooleanField(default=True)),
                ('max_login_attempts', models.PositiveIntegerField(default=5)),
                ('lockout_duration', models.PositiveIntegerField(default=900, help_text='Seconds')),
                ('enable_ip_whitelist', models.BooleanField(default=False)),
                ('ip_whitelist', models.JSONField(blank=True, default=list)),
                ('enable_cors', models.BooleanField(default=True)),
                ('allowed_origins', models.JSONField(blank=True, default=list)),
                ('enable_csrf_protection', models.BooleanField(default=True)),
                ('enable_content_security_policy', models.BooleanField(default=True)),
                ('require_email_verification', models.BooleanField(default=True)),
                ('enable_backup_auth', models.BooleanField(default=True)),
                ('enable_caching', models.BooleanField(default=True)),
                ('cache_duration', models.PositiveIntegerField(default=3600, help_text='Seconds')),
                ('enable_image_optimization', models.BooleanField(default=True)),
                ('image_quality', models.IntegerField(default=80, help_text='Compression quality percentage (1-100)')),
                ('enable_gzip', models.BooleanField(default=True)),
                ('enable_minification', models.BooleanField(default=True)),
                ('cdn_url', models.CharField(blank=True, default='', max_length=2048)),
                ('max_file_upload_size', models.PositiveBigIntegerField(default=52428800, help_text='Bytes')),
                ('enable_lazy_loading', models.BooleanField(default=True)),
                ('enable_prefetching', models.BooleanField(default=True)),
                ('database_pool_size', models.PositiveIntegerField(default=10)),
                ('api_rate_limit', models.PositiveIntegerField(default=100, help_text='Requests per minute')),
                ('facility_name', models.CharField(max_length=255)),
                ('facility_type', models.CharField(blank=True, choices=[('clinic', 'Clinic'), ('hospital', 'Hospital'), ('wellness_center', 'Wellness center'), ('therapy_center', 'Therapy center'), ('laboratory', 'Laboratory'), ('pharmacy', 'Pharmacy'), ('other', 'Other')], default='', max_length=20)),
                ('license_number', models.CharField(blank=True, db_index=True, default='', max_length=100)),
                ('tax_id', models.CharField(blank=True, default='', max_length=100)),
                ('enable_appointment_system', models.BooleanField(default=True)),
                ('appointment_buffer', models.PositiveIntegerField(default=15, help_text='Minutes between appointments')),
                ('max_concurrent_appointments', models.PositiveIntegerField(default=10)),
                ('enable_patient_portal', models.BooleanField(default=True)),
                ('enable_telemedicine', models.BooleanField(default=False)),
                ('enable_prescription_management', models.BooleanField(default=False)),
                ('enable_medical_records', models.BooleanField(default=False)),
                ('enable_billing_system', models.BooleanField(default=True)),
                ('accepted_insurance', models.JSONField(blank=True, default=list)),
                ('departments', models.JSONField(blank=True, default=list)),
                ('languages', models.JSONField(blank=True, default=configuration.models.default_languages)),
                ('hipaa_compliant', models.BooleanField(default=True)),
                ('gdpr_compliant', models.BooleanField(default=True)),
                ('privacy_policy_url', models.CharField(blank=True, default='', max_length=2048)),
                ('terms_of_service_url', models.CharField(blank=True, default='', max_length=2048)),
                ('cookie_policy_url', models.CharField(blank=True, default='', max_length=2048)),
                ('disclaimer_url', models.CharField(blank=True, default='', max_length=2048)),
                ('enable_cookie_consent', models.BooleanField(default=True)),
                ('enable_age_verification', models.BooleanField(default=False)),
                ('minimum_age', models.PositiveIntegerField(default=18)),
                ('gdpr_enabled', models.BooleanField(default=True)),
                ('ccpa_enabled', models.BooleanField(default=False)),
                ('data_retention_days', models.PositiveIntegerField(default=2555, help_text='7 years')),
                ('enable_user_data_export', models.BooleanField(default=True)),
                ('enable_user_data_deletion', models.BooleanField(default=True)),
                ('enable_audit_logging', models.BooleanField(default=True)),
                ('disclaimer_text', models.TextField(blank=True, default='')),
                ('compliance_officer_email', models.EmailField(blank=True, default='', max_length=254)),
                ('dpo_email', models.EmailField(blank=True, default='', help_text='Data Protection Officer (GDPR)', max_length=254)),
                ('enable_email_notifications', models.BooleanField(default=True)),
                ('enable_sms_notifications', models.BooleanField(default=True)),
                ('enable_push_notifications', models.BooleanField(default=True)),
                ('email_from', models.EmailField(blank=True, default='', max_length=254)),
                ('email_from_name', models.CharField(blank=True, default='', max_length=255)),
                ('smtp_provider', models.CharField(choices=[('smtp', 'SMTP'), ('sendgrid', 'SendGrid'), ('mailgun', 'Mailgun'), ('aws_ses', 'AWS SES'), ('other', 'Other')], default='smtp', max_length=20)),
                ('appointment_reminder', models.BooleanField(default=True)),
                ('appointment_reminder_hours', models.PositiveIntegerField(default=24)),
                ('maintenance_mode', models.BooleanField(default=False)),
                ('maintenance_message', models.TextField(blank=True, default='')),
                ('auto_backup_enabled', models.BooleanField(default=True)),
                ('backup_frequency', models.CharField(choices=[('daily', 'Daily'), ('weekly', 'Weekly'), ('monthly', 'Monthly')], default='daily', max_length=10)),
                ('backup_retention_days', models.PositiveIntegerField(default=30)),
                ('log_retention_days', models.PositiveIntegerField(default=90)),
                ('update_history', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('last_updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'settings',
                'verbose_name': 'Site settings',
                'verbose_name_plural': 'Site settings',
                'indexes': [
                    models.Index(fields=['contact_email'], name='settings_contact_3a9f12_idx'),
                ],
            },
        ),
    ]
