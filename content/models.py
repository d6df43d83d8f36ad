"""
Content models: pages with version history, and tags.

A Page is one large record: body and sections, an embedded SEO block,
template, visibility, analytics, advanced features, media, performance,
workflow and metadata groups (flattened with a prefix per group), plus
parent/child and related-page references.
"""
import logging
import math

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MaxValueValidator, MinValueValidator
from django.db import connections, models, transaction
from django.db.models import F
from django.utils import timezone

from cms_backend.persistence import DocumentModel
from .validators import (
    ChoiceListValidator,
    validate_future_datetime,
    validate_page_slug,
    validate_sections,
)

logger = logging.getLogger(__name__)

META_TITLE_LENGTH = 60
META_DESCRIPTION_LENGTH = 160
WORDS_PER_MINUTE = 200

ACCESS_ROLES = ['admin', 'editor', 'author', 'subscriber', 'guest']


def default_access_roles():
    return ['admin', 'editor']


class TagQuerySet(models.QuerySet):

    def active(self):
        return self.filter(is_active=True)


class Tag(DocumentModel):
    """Flat label used to categorise content."""
    name = models.CharField(max_length=100, unique=True)
    slug = models.CharField(max_length=255, unique=True)
    description = models.TextField(
        blank=True,
        default='',
        validators=[MaxLengthValidator(500)]
    )
    color = models.CharField(max_length=20, default='#000000')
    icon = models.CharField(max_length=255, blank=True, default='')
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TagQuerySet.as_manager()

    class Meta:
        db_table = 'tags'
        ordering = ['name']
        indexes = [
            models.Index(fields=['slug']),
            models.Index(fields=['is_active']),
        ]

    def __str__(self):
        return self.name

    def pre_commit(self):
        self.name = (self.name or '').strip()
        self.slug = (self.slug or '').strip().lower()
        self.description = (self.description or '').strip()


class PageQuerySet(models.QuerySet):

    def published(self):
        return self.filter(status='published', published_at__lte=timezone.now())

    def by_page_type(self, page_type):
        return self.filter(page_type=page_type)

    def by_tag(self, tag):
        if connections[self.db].features.supports_json_field_contains:
            return self.filter(tags__contains=[tag])
        # SQLite has no JSON containment lookup
        page_ids = [pk for pk, tags in self.values_list('pk', 'tags') if tag in (tags or [])]
        return self.filter(pk__in=page_ids)

    def home_page(self):
        return self.filter(is_home_page=True).first()

    def increment_page_view(self, page_id):
        """Atomically bump the view counter; returns the updated page or None."""
        if not self.filter(pk=page_id).update(page_views=F('page_views') + 1):
            return None
        return self.get(pk=page_id)


class Page(DocumentModel):
    STATUS_CHOICES = [
        ('draft', 'Draft'),
        ('published', 'Published'),
        ('scheduled', 'Scheduled'),
        ('archived', 'Archived'),
    ]
    PAGE_TYPE_CHOICES = [
        ('standard', 'Standard'),
        ('landing', 'Landing'),
        ('service', 'Service'),
        ('product', 'Product'),
        ('blog', 'Blog'),
        ('contact', 'Contact'),
        ('testimonial', 'Testimonial'),
        ('faq', 'FAQ'),
        ('custom', 'Custom'),
    ]
    TEMPLATE_CHOICES = [
        ('default', 'Default'),
        ('blank', 'Blank'),
        ('sidebar', 'Sidebar'),
        ('fullwidth', 'Full width'),
        ('landing', 'Landing'),
        ('portfolio', 'Portfolio'),
        ('documentation', 'Documentation'),
        ('custom', 'Custom'),
    ]
    ANALYTICS_FIELDS = (
        'page_views', 'unique_visitors', 'bounce_rate', 'average_time_on_page',
        'conversion_rate', 'conversion_count', 'tracking_code', 'ga_page_id',
    )

    # Basic information
    title = models.CharField(max_length=200, db_index=True)
    slug = models.CharField(max_length=300, unique=True, validators=[validate_page_slug])
    content = models.TextField()
    excerpt = models.TextField(
        blank=True,
        default='',
        validators=[MaxLengthValidator(500, 'Excerpt cannot be more than 500 characters')]
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='authored_pages'
    )

    # Status
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='draft', db_index=True)
    published_at = models.DateTimeField(null=True, blank=True)
    scheduled_for = models.DateTimeField(null=True, blank=True)
    page_type = models.CharField(max_length=20, choices=PAGE_TYPE_CHOICES, default='standard', db_index=True)

    # Sections: [{id, type, title, content, data, order, is_visible, styling, metadata}]
    sections = models.JSONField(default=list, blank=True, validators=[validate_sections])

    # SEO
    seo_meta_title = models.CharField(max_length=META_TITLE_LENGTH, blank=True, default='')
    seo_meta_description = models.CharField(max_length=META_DESCRIPTION_LENGTH, blank=True, default='')
    seo_meta_keywords = models.JSONField(default=list, blank=True)
    seo_meta_image = models.CharField(max_length=2048, blank=True, default='')
    seo_canonical_url = models.CharField(max_length=2048, blank=True, default='')
    seo_og_title = models.CharField(max_length=255, blank=True, default='')
    seo_og_description = models.TextField(blank=True, default='')
    seo_og_image = models.CharField(max_length=2048, blank=True, default='')
    seo_og_type = models.CharField(max_length=50, default='website')
    seo_robots_index = models.BooleanField(default=True)
    seo_robots_follow = models.BooleanField(default=True)
    seo_structured_data = models.JSONField(null=True, blank=True)

    # Template
    template = models.CharField(max_length=20, choices=TEMPLATE_CHOICES, default='default')
    header_visible = models.BooleanField(default=True)
    footer_visible = models.BooleanField(default=True)
    sidebar_visible = models.BooleanField(default=False)
    custom_header_html = models.TextField(blank=True, default='')
    custom_footer_html = models.TextField(blank=True, default='')
    custom_css = models.TextField(blank=True, default='')
    custom_js = models.TextField(blank=True, default='')

    # Visibility & access control
    is_public = models.BooleanField(default=True)
    password_protected = models.BooleanField(default=False)
    access_password = models.CharField(max_length=128, null=True, blank=True)
    allowed_roles = models.JSONField(
        default=default_access_roles,
        blank=True,
        validators=[ChoiceListValidator(ACCESS_ROLES)]
    )
    restricted_users = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name='restricted_pages'
    )
    geo_restrictions_enabled = models.BooleanField(default=False)
    allowed_countries = models.JSONField(default=list, blank=True)
    blocked_countries = models.JSONField(default=list, blank=True)

    # Analytics
    page_views = models.PositiveIntegerField(default=0)
    unique_visitors = models.PositiveIntegerField(default=0)
    bounce_rate = models.FloatField(default=0, validators=[MinValueValidator(0), MaxValueValidator(100)])
    average_time_on_page = models.FloatField(default=0)
    conversion_rate = models.FloatField(default=0, validators=[MinValueValidator(0), MaxValueValidator(100)])
    conversion_count = models.PositiveIntegerField(default=0)
    tracking_code = models.TextField(blank=True, default='')
    ga_page_id = models.CharField(max_length=255, blank=True, default='')
    last_analytics_update = models.DateTimeField(null=True, blank=True)

    # Advanced features
    enable_comments = models.BooleanField(default=False)
    comment_moderation = models.BooleanField(default=True)
    enable_rating = models.BooleanField(default=False)
    average_rating = models.FloatField(default=0, validators=[MinValueValidator(0), MaxValueValidator(5)])
    rating_count = models.PositiveIntegerField(default=0)
    enable_social_sharing = models.BooleanField(default=True)
    related_pages = models.ManyToManyField('self', symmetrical=False, blank=True, related_name='related_from')
    tags = models.JSONField(default=list, blank=True)
    categories = models.JSONField(default=list, blank=True, help_text="Category identifiers")
    enable_versioning = models.BooleanField(default=True)
    current_version = models.PositiveIntegerField(default=1)

    # Media & attachments
    featured_image = models.CharField(max_length=2048, blank=True, default='')
    gallery = models.JSONField(default=list, blank=True)
    attachments = models.JSONField(default=list, blank=True, help_text="[{filename, url, type, uploaded_at}]")

    # Performance & caching
    enable_cache = models.BooleanField(default=True)
    cache_duration = models.PositiveIntegerField(default=3600, help_text="Seconds")
    lazy_load_images = models.BooleanField(default=True)
    minify_css = models.BooleanField(default=True)
    minify_js = models.BooleanField(default=True)
    compression_enabled = models.BooleanField(default=True)

    # Workflow & publishing
    submitted_at = models.DateTimeField(null=True, blank=True)
    submitted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    approved_at = models.DateTimeField(null=True, blank=True)
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    review_notes = models.TextField(blank=True, default='')
    requires_approval = models.BooleanField(default=True)

    # Metadata
    page_color = models.CharField(max_length=20, blank=True, default='')
    icon = models.CharField(max_length=255, blank=True, default='')
    banner = models.CharField(max_length=2048, blank=True, default='')
    display_order = models.IntegerField(default=0)
    is_home_page = models.BooleanField(default=False)
    is_sitemap = models.BooleanField(default=False)
    custom_metadata = models.JSONField(null=True, blank=True)

    # Hierarchy
    parent_page = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='child_pages'
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)
    last_modified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )

    objects = PageQuerySet.as_manager()

    class Meta:
        db_table = 'pages'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', '-published_at']),
            models.Index(fields=['author', '-created_at']),
            models.Index(fields=['page_type']),
            models.Index(fields=['parent_page']),
        ]

    def __str__(self):
        return f"{self.title} ({self.slug})"

    @property
    def url(self):
        return f"/pages/{self.slug}"

    @property
    def read_time(self):
        """Estimated reading time in minutes."""
        return math.ceil(len(self.content.split()) / WORDS_PER_MINUTE)

    @property
    def is_published(self):
        return (
            self.status == 'published'
            and self.published_at is not None
            and self.published_at <= timezone.now()
        )

    def pre_commit(self):
        self.title = (self.title or '').strip()
        self.slug = (self.slug or '').strip().lower()

        if self.status == 'published' and not self.published_at:
            self.published_at = timezone.now()

        if not self.seo_meta_title and self.title:
            self.seo_meta_title = self.title[:META_TITLE_LENGTH]
        if not self.seo_meta_description and self.excerpt:
            self.seo_meta_description = self.excerpt[:META_DESCRIPTION_LENGTH]

        for section in self.sections or []:
            if isinstance(section, dict):
                section.setdefault('order', 0)
                section.setdefault('is_visible', True)

    def clean(self):
        if self.scheduled_for and self.is_modified('scheduled_for'):
            try:
                validate_future_datetime(self.scheduled_for)
            except ValidationError as e:
                raise ValidationError({'scheduled_for': e.messages})

    def save(self, *args, changes='', **kwargs):
        # The snapshot commits together with the content it records
        with transaction.atomic():
            content_changed = self.is_modified('content')
            if not self._state.adding and kwargs.get('update_fields') is None:
                # Once inserted, the counter is only moved by _append_version
                kwargs['update_fields'] = [
                    field.name for field in self._meta.concrete_fields
                    if not field.primary_key and field.name != 'current_version'
                ]
            super().save(*args, **kwargs)
            if self.enable_versioning and content_changed:
                self._append_version(changes)

    def _append_version(self, changes=''):
        pages = type(self).objects.filter(pk=self.pk)
        version_number = pages.select_for_update().values_list('current_version', flat=True).get()
        PageVersion.objects.create(
            page=self,
            version_number=version_number,
            title=self.title,
            content=self.content,
            author_id=self.last_modified_by_id or self.author_id,
            changes=changes,
        )
        logger.debug(f"Page {self.pk}: stored version {version_number}")
        pages.update(current_version=F('current_version') + 1)
        self.current_version = version_number + 1
        self._remember_loaded(['current_version'])

    def publish(self):
        self.status = 'published'
        self.published_at = timezone.now()
        self.save()
        logger.info(f"Page {self.pk} published")
        return self

    def archive(self):
        self.status = 'archived'
        self.save()
        logger.info(f"Page {self.pk} archived")
        return self

    def revert(self, version_number):
        """
        Restore title and content from a stored version.
        Raises PageVersion.DoesNotExist (page untouched) if there is no such version.
        """
        version = self.version_history.get(version_number=version_number)
        self.content = version.content
        self.title = version.title
        self.save(changes=f"Reverted to version {version_number}")
        logger.info(f"Page {self.pk} reverted to version {version_number}")
        return self

    def update_analytics(self, **data):
        for key, value in data.items():
            if key not in self.ANALYTICS_FIELDS:
                raise ValueError(f"Unknown analytics field: {key}")
            setattr(self, key, value)
        self.last_analytics_update = timezone.now()
        self.save()
        return self

    def add_related_page(self, page):
        self.related_pages.add(page)
        self.save()
        return self

    def toggle_comments(self, enabled):
        self.enable_comments = enabled
        self.save()
        return self


class PageVersion(models.Model):
    """Append-only snapshot of a page's title and content."""
    page = models.ForeignKey(Page, on_delete=models.CASCADE, related_name='version_history')
    version_number = models.PositiveIntegerField()
    title = models.CharField(max_length=200)
    content = models.TextField(blank=True)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    changes = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'page_versions'
        ordering = ['version_number']
        unique_together = [('page', 'version_number')]

    def __str__(self):
        return f"{self.page.slug} v{self.version_number}"
