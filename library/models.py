"""
Media library models.
"""
import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator
from django.db import models
from django.db.models import F, Q
from django.utils import timezone

from cms_backend.persistence import DocumentModel, normalize_tags
from .validators import validate_related_content, validate_thumbnails

logger = logging.getLogger(__name__)

MEDIA_ICONS = {
    'image': '🖼️',
    'video': '🎥',
    'audio': '🎵',
    'document': '📄',
    'other': '📦',
}


class MediaQuerySet(models.QuerySet):

    def active(self):
        return self.filter(is_active=True)

    def by_category(self, category, **filters):
        return self.active().filter(category=category, **filters).order_by('-created_at')

    def public(self, **filters):
        return self.active().filter(is_public=True, status='approved', **filters).order_by('-created_at')

    def search(self, query, **filters):
        """Case-insensitive match on title, description or tags."""
        return self.active().filter(
            Q(title__icontains=query) | Q(description__icontains=query) | Q(tags__icontains=query),
            **filters
        ).order_by('-created_at')


class ActiveMediaManager(models.Manager.from_queryset(MediaQuerySet)):
    """Default manager. Soft-deleted media never leaves it."""

    def get_queryset(self):
        return super().get_queryset().filter(is_active=True)


class Media(DocumentModel):
    """
    An uploaded file (image, video, audio or document) and its metadata.
    Media is soft-deleted: deleted rows stay in the table with is_active=False.
    """
    MIME_TYPE_CHOICES = [
        ('image/jpeg', 'JPEG image'),
        ('image/png', 'PNG image'),
        ('image/gif', 'GIF image'),
        ('image/webp', 'WebP image'),
        ('image/svg+xml', 'SVG image'),
        ('video/mp4', 'MP4 video'),
        ('video/webm', 'WebM video'),
        ('audio/mpeg', 'MPEG audio'),
        ('audio/wav', 'WAV audio'),
        ('application/pdf', 'PDF document'),
    ]
    STORAGE_CHOICES = [
        ('local', 'Local'),
        ('s3', 'Amazon S3'),
        ('cloudinary', 'Cloudinary'),
        ('azure', 'Azure'),
    ]
    MEDIA_TYPE_CHOICES = [
        ('image', 'Image'),
        ('video', 'Video'),
        ('audio', 'Audio'),
        ('document', 'Document'),
        ('other', 'Other'),
    ]
    CATEGORY_CHOICES = [
        ('profile', 'Profile'),
        ('content', 'Content'),
        ('gallery', 'Gallery'),
        ('hero', 'Hero'),
        ('icon', 'Icon'),
        ('banner', 'Banner'),
        ('other', 'Other'),
    ]
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('approved', 'Approved'),
        ('rejected', 'Rejected'),
        ('archived', 'Archived'),
    ]
    LICENSE_CHOICES = [
        ('public-domain', 'Public domain'),
        ('cc-by', 'CC BY'),
        ('cc-by-sa', 'CC BY-SA'),
        ('proprietary', 'Proprietary'),
        ('other', 'Other'),
    ]

    # Basic information
    title = models.CharField(max_length=100)
    description = models.TextField(
        blank=True,
        default='',
        validators=[MaxLengthValidator(500, 'Description cannot exceed 500 characters')]
    )
    alt_text = models.CharField(max_length=200, blank=True, default='')

    # File information
    filename = models.CharField(max_length=255)
    original_name = models.CharField(max_length=255)
    file_size = models.PositiveBigIntegerField(help_text="Size in bytes")
    mime_type = models.CharField(max_length=50, choices=MIME_TYPE_CHOICES)
    file_extension = models.CharField(max_length=20)

    # Storage & URLs
    url = models.CharField(max_length=2048)
    upload_path = models.CharField(max_length=1024)
    storage_service = models.CharField(max_length=20, choices=STORAGE_CHOICES, default='local')

    # Image-specific properties
    image_width = models.IntegerField(null=True, blank=True)
    image_height = models.IntegerField(null=True, blank=True)
    image_format = models.CharField(max_length=50, null=True, blank=True)
    image_color_space = models.CharField(max_length=50, null=True, blank=True)
    image_has_alpha = models.BooleanField(default=False)
    image_orientation = models.IntegerField(default=1)

    # [{size: small|medium|large|xlarge, url, width, height, file_size}]
    thumbnails = models.JSONField(default=list, blank=True, validators=[validate_thumbnails])

    # Classification
    media_type = models.CharField(max_length=20, choices=MEDIA_TYPE_CHOICES)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES, default='other')
    tags = models.JSONField(default=list, blank=True)

    # Relationships
    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='uploaded_media'
    )
    related_content = models.JSONField(
        default=list,
        blank=True,
        validators=[validate_related_content],
        help_text="[{content_type, content_id}]"
    )

    # Status & visibility
    is_active = models.BooleanField(default=True)
    is_public = models.BooleanField(default=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')

    # SEO
    seo_keywords = models.JSONField(default=list, blank=True)
    seo_canonical_url = models.CharField(max_length=2048, blank=True, default='')
    seo_no_index = models.BooleanField(default=False)

    # License & copyright
    license = models.CharField(max_length=20, choices=LICENSE_CHOICES, default='proprietary')
    copyright_holder = models.CharField(max_length=255, blank=True, default='')
    copyright_year = models.PositiveIntegerField(null=True, blank=True)

    # Analytics
    views = models.PositiveIntegerField(default=0)
    downloads = models.PositiveIntegerField(default=0)
    shares = models.PositiveIntegerField(default=0)

    # Audit trail
    uploaded_at = models.DateTimeField(default=timezone.now)
    last_modified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    deleted_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    deleted_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ActiveMediaManager()
    all_objects = MediaQuerySet.as_manager()

    class Meta:
        db_table = 'media'
        ordering = ['-created_at']
        verbose_name_plural = 'media'
        indexes = [
            models.Index(fields=['uploaded_by']),
            models.Index(fields=['media_type']),
            models.Index(fields=['category']),
            models.Index(fields=['is_active', 'is_public']),
            models.Index(fields=['status']),
            models.Index(fields=['-created_at']),
        ]

    def __str__(self):
        return f"{self.title} ({self.filename})"

    @property
    def icon(self):
        return MEDIA_ICONS.get(self.media_type, MEDIA_ICONS['other'])

    @property
    def readable_file_size(self):
        size = self.file_size or 0
        units = ['Bytes', 'KB', 'MB', 'GB']
        unit = 0
        while size >= 1024 and unit < len(units) - 1:
            size /= 1024
            unit += 1
        size = round(size, 2)
        if size == int(size):
            size = int(size)
        return f"{size} {units[unit]}"

    def pre_commit(self):
        self.title = (self.title or '').strip()
        self.filename = (self.filename or '').strip()
        self.original_name = (self.original_name or '').strip()
        self.file_extension = (self.file_extension or '').strip().lower()
        self.url = (self.url or '').strip()
        self.upload_path = (self.upload_path or '').strip()
        self.tags = normalize_tags(self.tags)

    def clean(self):
        if self.media_type == 'image':
            if self.image_width is not None and self.image_width <= 0:
                raise ValidationError('Image width must be greater than 0')
            if self.image_height is not None and self.image_height <= 0:
                raise ValidationError('Image height must be greater than 0')

    def _increment(self, counter):
        type(self).all_objects.filter(pk=self.pk).update(**{counter: F(counter) + 1})
        self.refresh_from_db(fields=[counter])
        return self

    def increment_views(self):
        return self._increment('views')

    def increment_downloads(self):
        return self._increment('downloads')

    def increment_shares(self):
        return self._increment('shares')

    def soft_delete(self, user):
        self.is_active = False
        self.deleted_by = user
        self.deleted_at = timezone.now()
        self.save()
        logger.info(f"Media {self.pk} soft-deleted by user {getattr(user, 'pk', user)}")
        return self

    def restore(self):
        self.is_active = True
        self.deleted_by = None
        self.deleted_at = None
        self.save()
        logger.info(f"Media {self.pk} restored")
        return self
