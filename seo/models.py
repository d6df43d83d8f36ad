"""
SEO models: per-page metadata keyed by page slug.

One SEO record holds the meta tags, Open Graph and Twitter Card fields,
Schema.org structured data, canonical / robots directives and sitemap
settings for a single page.
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from cms_backend.persistence import DocumentModel

ROBOTS_META_CHOICES = [
    ('index, follow', 'index, follow'),
    ('noindex, follow', 'noindex, follow'),
    ('index, nofollow', 'index, nofollow'),
    ('noindex, nofollow', 'noindex, nofollow'),
]


class SEOQuerySet(models.QuerySet):

    def in_sitemap(self):
        return self.filter(include_in_sitemap=True).order_by('-sitemap_priority', 'page_slug')


class SEO(DocumentModel):
    PAGE_TYPE_CHOICES = [
        ('homepage', 'Homepage'),
        ('service', 'Service'),
        ('blog', 'Blog'),
        ('product', 'Product'),
        ('custom', 'Custom'),
        ('other', 'Other'),
    ]
    OG_TYPE_CHOICES = [
        ('website', 'Website'),
        ('article', 'Article'),
        ('product', 'Product'),
        ('business.business', 'Business'),
        ('other', 'Other'),
    ]
    TWITTER_CARD_CHOICES = [
        ('summary', 'Summary'),
        ('summary_large_image', 'Summary with large image'),
        ('app', 'App'),
        ('player', 'Player'),
    ]
    CHANGEFREQ_CHOICES = [
        ('always', 'Always'),
        ('hourly', 'Hourly'),
        ('daily', 'Daily'),
        ('weekly', 'Weekly'),
        ('monthly', 'Monthly'),
        ('yearly', 'Yearly'),
        ('never', 'Never'),
    ]

    # Page identification
    page_title = models.CharField(max_length=255, help_text="Title shown in the browser tab and search results")
    page_slug = models.CharField(max_length=300, unique=True, help_text="URL-friendly slug for the page")
    page_type = models.CharField(max_length=20, choices=PAGE_TYPE_CHOICES, default='custom')

    # Meta information
    meta_description = models.CharField(max_length=160, help_text="Shown in search results")
    meta_keywords = models.JSONField(default=list, blank=True)
    meta_author = models.CharField(max_length=255, blank=True, default='')

    # Open Graph
    og_title = models.CharField(max_length=255, blank=True, default='')
    og_description = models.CharField(max_length=160, blank=True, default='')
    og_image = models.CharField(max_length=2048, blank=True, default='')
    og_type = models.CharField(max_length=30, choices=OG_TYPE_CHOICES, default='website')

    # Twitter Card
    twitter_card = models.CharField(max_length=30, choices=TWITTER_CARD_CHOICES, default='summary_large_image')
    twitter_title = models.CharField(max_length=255, blank=True, default='')
    twitter_description = models.CharField(max_length=200, blank=True, default='')
    twitter_image = models.CharField(max_length=2048, blank=True, default='')

    # JSON-LD structured data (Schema.org markup)
    schema_markup = models.JSONField(null=True, blank=True)

    canonical_url = models.CharField(max_length=2048, blank=True, default='')
    robots_meta = models.CharField(max_length=30, choices=ROBOTS_META_CHOICES, default='index, follow')
    # [{language, url}]
    alternate_languages = models.JSONField(default=list, blank=True)

    # Sitemap
    include_in_sitemap = models.BooleanField(default=True)
    sitemap_priority = models.FloatField(
        default=0.5,
        validators=[MinValueValidator(0.0), MaxValueValidator(1.0)]
    )
    sitemap_changefreq = models.CharField(max_length=10, choices=CHANGEFREQ_CHOICES, default='weekly')

    focus_keyword = models.CharField(max_length=255, blank=True, default='')
    readable_slug = models.CharField(max_length=300, blank=True, default='')
    # [{name, url}]
    breadcrumbs = models.JSONField(default=list, blank=True)

    associated_page = models.ForeignKey(
        'content.Page',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='seo_entries'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SEOQuerySet.as_manager()

    class Meta:
        db_table = 'seos'
        ordering = ['-created_at']
        verbose_name = 'SEO entry'
        verbose_name_plural = 'SEO entries'
        indexes = [
            models.Index(fields=['page_slug']),
            models.Index(fields=['page_type']),
            models.Index(fields=['include_in_sitemap']),
            models.Index(fields=['-created_at']),
        ]

    def __str__(self):
        return f"SEO for /{self.page_slug}"

    @property
    def full_canonical_url(self):
        return self.canonical_url or f"/{self.page_slug}"

    def pre_commit(self):
        self.page_title = (self.page_title or '').strip()
        self.page_slug = (self.page_slug or '').strip().lower()
        self.meta_description = (self.meta_description or '').strip()
        self.canonical_url = (self.canonical_url or '').strip()
