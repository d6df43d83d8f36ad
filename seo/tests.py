"""
Tests for seo app - per-page SEO entries.
"""
import pytest
from django.core.exceptions import ValidationError


@pytest.fixture
def create_seo():
    def _create_seo(page_slug="about", **kwargs):
        from seo.models import SEO
        defaults = {
            'page_title': 'About us',
            'meta_description': 'Learn about our complementary medicine clinic.',
        }
        defaults.update(kwargs)
        return SEO.objects.create(page_slug=page_slug, **defaults)
    return _create_seo


@pytest.mark.django_db
class TestSEO:

    def test_full_canonical_url_falls_back_to_slug(self, create_seo):
        seo = create_seo()
        assert seo.full_canonical_url == "/about"

    def test_full_canonical_url_uses_canonical(self, create_seo):
        seo = create_seo(canonical_url="https://example.com/about-us")
        assert seo.full_canonical_url == "https://example.com/about-us"

    def test_slug_lowercased(self, create_seo):
        seo = create_seo(page_slug="  About-Clinic ")
        assert seo.page_slug == "about-clinic"

    def test_duplicate_slug_rejected(self, create_seo):
        create_seo()
        with pytest.raises(ValidationError) as exc:
            create_seo(page_slug="ABOUT")
        assert 'page_slug' in exc.value.message_dict

    def test_defaults(self, create_seo):
        seo = create_seo()
        assert seo.robots_meta == 'index, follow'
        assert seo.og_type == 'website'
        assert seo.twitter_card == 'summary_large_image'
        assert seo.sitemap_priority == 0.5
        assert seo.sitemap_changefreq == 'weekly'

    def test_meta_description_length(self, create_seo):
        with pytest.raises(ValidationError) as exc:
            create_seo(meta_description="x" * 161)
        assert 'meta_description' in exc.value.message_dict

    def test_sitemap_priority_range(self, create_seo):
        with pytest.raises(ValidationError) as exc:
            create_seo(sitemap_priority=1.5)
        assert 'sitemap_priority' in exc.value.message_dict

    def test_invalid_robots_meta(self, create_seo):
        with pytest.raises(ValidationError) as exc:
            create_seo(robots_meta='nofollow')
        assert 'robots_meta' in exc.value.message_dict

    def test_in_sitemap(self, create_seo):
        from seo.models import SEO
        high = create_seo(page_slug="home", sitemap_priority=1.0)
        low = create_seo(page_slug="contact", sitemap_priority=0.3)
        create_seo(page_slug="hidden", include_in_sitemap=False)
        assert list(SEO.objects.in_sitemap()) == [high, low]

    def test_associated_page_cleared_when_page_deleted(self, create_seo):
        from django.contrib.auth import get_user_model
        from content.models import Page
        author = get_user_model().objects.create_user(
            username="author",
            email="author@example.com",
            password="testpass123",
            first_name="Page",
            last_name="Author",
        )
        page = Page.objects.create(author=author, title="About", slug="about", content="Hello")
        seo = create_seo(associated_page=page)

        page.delete()

        seo.refresh_from_db()
        assert seo.associated_page is None

    def test_serializer_includes_full_canonical_url(self, create_seo):
        from seo.serializers import SEOSerializer
        data = SEOSerializer(create_seo()).data
        assert data['full_canonical_url'] == "/about"
        assert data['page_slug'] == "about"
