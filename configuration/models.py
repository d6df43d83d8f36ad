"""
Site-wide configuration for the Tamamlayıcı Sağlık CMS.

SiteSettings is a singleton: every save writes the row with primary key
SINGLETON_ID. Sections (contact, seo, design, security, performance,
healthcare, legal, notifications, maintenance) are flattened into prefixed
columns.
"""
import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from cms_backend.persistence import DocumentModel

logger = logging.getLogger(__name__)

SINGLETON_ID = 1

DEFAULT_MAX_UPLOAD_SIZE = 50 * 1024 * 1024
DEFAULT_SESSION_TIMEOUT = 3600
PASSWORD_MIN_LENGTH_FLOOR = 6


def default_languages():
    return ['Turkish', 'English']


class SiteSettings(DocumentModel):
    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_ID, editable=False)

    # ==================== CONTACT ====================
    contact_email = models.EmailField(blank=True, default='', help_text="Primary contact email address")
    contact_phone = models.CharField(max_length=50, blank=True, default='', help_text="Primary phone number")
    emergency_phone = models.CharField(max_length=50, blank=True, default='')
    address_street = models.CharField(max_length=255, blank=True, default='')
    address_city = models.CharField(max_length=100, blank=True, default='')
    address_state = models.CharField(max_length=100, blank=True, default='')
    address_postal_code = models.CharField(max_length=20, blank=True, default='')
    address_country = models.CharField(max_length=100, default='Turkey')
    # {"monday": {"opening": "09:00", "closing": "18:00"}, ...}
    working_hours = models.JSONField(default=dict, blank=True)
    social_facebook = models.CharField(max_length=500, blank=True, default='')
    social_twitter = models.CharField(max_length=500, blank=True, default='')
    social_instagram = models.CharField(max_length=500, blank=True, default='')
    social_linkedin = models.CharField(max_length=500, blank=True, default='')
    social_youtube = models.CharField(max_length=500, blank=True, default='')
    social_whatsapp = models.CharField(max_length=500, blank=True, default='')

    # ==================== SEO ====================
    site_title = models.CharField(max_length=255, help_text="Default site title for SEO")
    site_description = models.CharField(max_length=160, help_text="Meta description for the homepage")
    site_keywords = models.JSONField(default=list, blank=True)
    google_analytics_id = models.CharField(max_length=50, blank=True, default='',
        help_text="UA-XXXXXXXXX-X or G-XXXXXXXXXX")
    google_search_console_id = models.CharField(max_length=255, blank=True, default='')
    bing_webmaster_id = models.CharField(max_length=255, blank=True, default='')
    facebook_pixel_id = models.CharField(max_length=50, blank=True, default='')
    twitter_handle = models.CharField(max_length=50, blank=True, default='')
    og_image = models.CharField(max_length=2048, blank=True, default='')
    sitemap_url = models.CharField(max_length=255, default='/sitemap.xml')
    robots_txt = models.TextField(blank=True, default='')
    enable_xml_sitemap = models.BooleanField(default=True)
    canonical_url = models.CharField(max_length=2048, blank=True, default='')

    # ==================== DESIGN ====================
    THEME_CHOICES = [('light', 'Light'), ('dark', 'Dark'), ('auto', 'Auto')]
    FONT_SIZE_CHOICES = [('small', 'Small'), ('medium', 'Medium'), ('large', 'Large')]

    theme = models.CharField(max_length=10, choices=THEME_CHOICES, default='light')
    primary_color = models.CharField(max_length=20, default='#0066cc')
    secondary_color = models.CharField(max_length=20, default='#00cc00')
    accent_color = models.CharField(max_length=20, default='#ff6600')
    logo = models.CharField(max_length=2048, blank=True, default='')
    favicon = models.CharField(max_length=2048, blank=True, default='')
    font_family = models.CharField(max_length=255, default='Inter, sans-serif')
    heading_font_family = models.CharField(max_length=255, default='Poppins, sans-serif')
    font_size = models.CharField(max_length=10, choices=FONT_SIZE_CHOICES, default='medium')
    enable_dark_mode = models.BooleanField(default=True)
    enable_animations = models.BooleanField(default=True)
    animation_duration = models.PositiveIntegerField(default=300, help_text="Milliseconds")
    breakpoint_mobile = models.PositiveIntegerField(default=480)
    breakpoint_tablet = models.PositiveIntegerField(default=768)
    breakpoint_desktop = models.PositiveIntegerField(default=1024)
    breakpoint_wide = models.PositiveIntegerField(default=1440)

    # ==================== SECURITY ====================
    enable_ssl = models.BooleanField(default=True)
    enable_two_factor = models.BooleanField(default=True, help_text="Require 2FA for admin accounts")
    password_min_length = models.IntegerField(default=8)
    password_require_numbers = models.BooleanField(default=True)
    password_require_special_chars = models.BooleanField(default=True)
    password_require_uppercase = models.BooleanField(default=True)
    session_timeout = models.PositiveIntegerField(default=DEFAULT_SESSION_TIMEOUT, help_text="Seconds")
    enable_rate_limiting = models.BooleanField(default=True)
    max_login_attempts = models.PositiveIntegerField(default=5)
    lockout_duration = models.PositiveIntegerField(default=900, help_text="Seconds")
    enable_ip_whitelist = models.BooleanField(default=False)
    ip_whitelist = models.JSONField(default=list, blank=True)
    enable_cors = models.BooleanField(default=True)
    allowed_origins = models.JSONField(default=list, blank=True)
    enable_csrf_protection = models.BooleanField(default=True)
    enable_content_security_policy = models.BooleanField(default=True)
    require_email_verification = models.BooleanField(default=True)
    enable_backup_auth = models.BooleanField(default=True)

    # ==================== PERFORMANCE ====================
    enable_caching = models.BooleanField(default=True)
    cache_duration = models.PositiveIntegerField(default=3600, help_text="Seconds")
    enable_image_optimization = models.BooleanField(default=True)
    image_quality = models.IntegerField(default=80, help_text="Compression quality percentage (1-100)")
    enable_gzip = models.BooleanField(default=True)
    enable_minification = models.BooleanField(default=True)
    cdn_url = models.CharField(max_length=2048, blank=True, default='')
    max_file_upload_size = models.PositiveBigIntegerField(default=DEFAULT_MAX_UPLOAD_SIZE, help_text="Bytes")
    enable_lazy_loading = models.BooleanField(default=True)
    enable_prefetching = models.BooleanField(default=True)
    database_pool_size = models.PositiveIntegerField(default=10)
    api_rate_limit = models.PositiveIntegerField(default=100, help_text="Requests per minute")

    # ==================== HEALTHCARE ====================
    FACILITY_TYPE_CHOICES = [
        ('clinic', 'Clinic'),
        ('hospital', 'Hospital'),
        ('wellness_center', 'Wellness center'),
        ('therapy_center', 'Therapy center'),
        ('laboratory', 'Laboratory'),
        ('pharmacy', 'Pharmacy'),
        ('other', 'Other'),
    ]

    facility_name = models.CharField(max_length=255)
    facility_type = models.CharField(max_length=20, choices=FACILITY_TYPE_CHOICES, blank=True, default='')
    license_number = models.CharField(max_length=100, blank=True, default='', db_index=True)
    tax_id = models.CharField(max_length=100, blank=True, default='')
    enable_appointment_system = models.BooleanField(default=True)
    appointment_buffer = models.PositiveIntegerField(default=15, help_text="Minutes between appointments")
    max_concurrent_appointments = models.PositiveIntegerField(default=10)
    enable_patient_portal = models.BooleanField(default=True)
    enable_telemedicine = models.BooleanField(default=False)
    enable_prescription_management = models.BooleanField(default=False)
    enable_medical_records = models.BooleanField(default=False)
    enable_billing_system = models.BooleanField(default=True)
    accepted_insurance = models.JSONField(default=list, blank=True)
    departments = models.JSONField(default=list, blank=True)
    languages = models.JSONField(default=default_languages, blank=True)
    hipaa_compliant = models.BooleanField(default=True)
    gdpr_compliant = models.BooleanField(default=True)

    # ==================== LEGAL ====================
    privacy_policy_url = models.CharField(max_length=2048, blank=True, default='')
    terms_of_service_url = models.CharField(max_length=2048, blank=True, default='')
    cookie_policy_url = models.CharField(max_length=2048, blank=True, default='')
    disclaimer_url = models.CharField(max_length=2048, blank=True, default='')
    enable_cookie_consent = models.BooleanField(default=True)
    enable_age_verification = models.BooleanField(default=False)
    minimum_age = models.PositiveIntegerField(default=18)
    gdpr_enabled = models.BooleanField(default=True)
    ccpa_enabled = models.BooleanField(default=False)
    data_retention_days = models.PositiveIntegerField(default=2555, help_text="7 years")
    enable_user_data_export = models.BooleanField(default=True)
    enable_user_data_deletion = models.BooleanField(default=True)
    enable_audit_logging = models.BooleanField(default=True)
    disclaimer_text = models.TextField(blank=True, default='')
    compliance_officer_email = models.EmailField(blank=True, default='')
    dpo_email = models.EmailField(blank=True, default='', help_text="Data Protection Officer (GDPR)")

    # ==================== NOTIFICATIONS ====================
    SMTP_PROVIDER_CHOICES = [
        ('smtp', 'SMTP'),
        ('sendgrid', 'SendGrid'),
        ('mailgun', 'Mailgun'),
        ('aws_ses', 'AWS SES'),
        ('other', 'Other'),
    ]

    enable_email_notifications = models.BooleanField(default=True)
    enable_sms_notifications = models.BooleanField(default=True)
    enable_push_notifications = models.BooleanField(default=True)
    email_from = models.EmailField(blank=True, default='')
    email_from_name = models.CharField(max_length=255, blank=True, default='')
    smtp_provider = models.CharField(max_length=20, choices=SMTP_PROVIDER_CHOICES, default='smtp')
    appointment_reminder = models.BooleanField(default=True)
    appointment_reminder_hours = models.PositiveIntegerField(default=24)

    # ==================== MAINTENANCE ====================
    BACKUP_FREQUENCY_CHOICES = [('daily', 'Daily'), ('weekly', 'Weekly'), ('monthly', 'Monthly')]

    maintenance_mode = models.BooleanField(default=False)
    maintenance_message = models.TextField(blank=True, default='')
    auto_backup_enabled = models.BooleanField(default=True)
    backup_frequency = models.CharField(max_length=10, choices=BACKUP_FREQUENCY_CHOICES, default='daily')
    backup_retention_days = models.PositiveIntegerField(default=30)
    log_retention_days = models.PositiveIntegerField(default=90)

    # ==================== METADATA ====================
    last_updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    # [{updated_at, updated_by, changes}]
    update_history = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'settings'
        verbose_name = 'Site settings'
        verbose_name_plural = 'Site settings'
        indexes = [
            models.Index(fields=['contact_email']),
        ]

    def __str__(self):
        return self.site_title or 'Site settings'

    @classmethod
    def load(cls):
        """Return the singleton settings row. Raises DoesNotExist before the first save."""
        return cls.objects.get(pk=SINGLETON_ID)

    def pre_commit(self):
        self.pk = SINGLETON_ID
        if not self._state.adding:
            return
        # A second instance built in memory overwrites the stored row
        created_at = type(self).objects.filter(pk=SINGLETON_ID).values_list('created_at', flat=True).first()
        if created_at is not None:
            self._state.adding = False
            self.created_at = created_at

    def clean(self):
        if not self.contact_email and not self.contact_phone:
            raise ValidationError('At least email or phone contact information must be provided')
        if self.password_min_length is not None and self.password_min_length < PASSWORD_MIN_LENGTH_FLOOR:
            raise ValidationError(
                f'Password minimum length must be at least {PASSWORD_MIN_LENGTH_FLOOR} characters'
            )
        if self.image_quality is not None and not 1 <= self.image_quality <= 100:
            raise ValidationError('Image quality must be between 1 and 100')

    def record_update(self, user, changes=''):
        """Append an update-history entry and save."""
        self.last_updated_by = user
        self.update_history = list(self.update_history or []) + [{
            'updated_at': timezone.now().isoformat(),
            'updated_by': getattr(user, 'pk', None),
            'changes': changes,
        }]
        self.save()
        logger.info(f"Site settings updated by user {getattr(user, 'pk', None)}: {changes}")
        return self
