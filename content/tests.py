"""
Tests for content app - pages, version history and tags.
"""
from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.utils import timezone


@pytest.fixture
def create_user():
    def _create_user(email="author@example.com", username="author"):
        return get_user_model().objects.create_user(
            username=username,
            email=email,
            password="testpass123",
            first_name="Page",
            last_name="Author",
        )
    return _create_user


@pytest.fixture
def author(create_user):
    return create_user()


@pytest.fixture
def create_page(author):
    def _create_page(slug="about-us", title="About Us", content="Original content", **kwargs):
        from content.models import Page
        return Page.objects.create(author=author, slug=slug, title=title, content=content, **kwargs)
    return _create_page


@pytest.mark.django_db
class TestPublishing:

    def test_published_at_stamped_when_published(self, create_page):
        page = create_page(status='published')
        assert page.published_at is not None
        assert page.is_published

    def test_published_at_not_overwritten_on_resave(self, create_page):
        page = create_page(status='published')
        first = page.published_at

        page.title = "About Our Clinic"
        page.save()
        page.status = 'draft'
        page.save()
        page.status = 'published'
        page.save()

        page.refresh_from_db()
        assert page.published_at == first

    def test_draft_has_no_published_at(self, create_page):
        page = create_page()
        assert page.status == 'draft'
        assert page.published_at is None
        assert not page.is_published

    def test_publish_and_archive(self, create_page):
        page = create_page()
        page.publish()
        page.refresh_from_db()
        assert page.status == 'published'
        assert page.published_at is not None

        page.archive()
        page.refresh_from_db()
        assert page.status == 'archived'
        assert not page.is_published


@pytest.mark.django_db
class TestVersionHistory:

    def test_first_save_records_version_one(self, create_page):
        page = create_page()
        versions = list(page.version_history.all())
        assert [v.version_number for v in versions] == [1]
        assert versions[0].content == "Original content"
        assert page.current_version == 2

    def test_content_change_appends_version(self, create_page):
        page = create_page()
        page.content = "Second draft"
        page.save(changes="Rewrote intro")

        page.refresh_from_db()
        versions = list(page.version_history.all())
        assert [v.version_number for v in versions] == [1, 2]
        assert versions[1].content == "Second draft"
        assert versions[1].changes == "Rewrote intro"
        assert page.current_version == 3

    def test_unchanged_content_appends_nothing(self, create_page):
        page = create_page()
        page.title = "New title"
        page.save()
        assert page.version_history.count() == 1
        assert page.current_version == 2

    def test_saves_from_stale_copies_both_recorded(self, create_page):
        from content.models import Page
        page = create_page()
        first = Page.objects.get(pk=page.pk)
        second = Page.objects.get(pk=page.pk)

        first.content = "Edited by first"
        first.save()
        second.content = "Edited by second"
        second.save()

        page.refresh_from_db()
        assert page.content == "Edited by second"
        assert page.current_version == 4
        assert second.current_version == 4
        versions = list(page.version_history.all())
        assert [v.version_number for v in versions] == [1, 2, 3]
        assert versions[2].content == "Edited by second"

    def test_stale_copy_does_not_roll_back_counter(self, create_page):
        from content.models import Page
        page = create_page()
        stale = Page.objects.get(pk=page.pk)

        page.content = "Second draft"
        page.save()
        stale.title = "Retitled"
        stale.save()

        page.refresh_from_db()
        assert page.title == "Retitled"
        assert page.current_version == 3

    def test_deferred_content_not_treated_as_changed(self, create_page):
        from content.models import Page
        page = create_page()
        partial = Page.objects.defer('content').get(pk=page.pk)

        partial.title = "Retitled"
        partial.save()

        assert page.version_history.count() == 1
        page.refresh_from_db()
        assert page.title == "Retitled"
        assert page.content == "Original content"

    def test_versioning_disabled(self, create_page):
        page = create_page(enable_versioning=False)
        page.content = "Edited"
        page.save()
        assert page.version_history.count() == 0
        assert page.current_version == 1

    def test_version_author_is_last_editor(self, create_page, create_user):
        page = create_page()
        editor = create_user(email="editor@example.com", username="editor")
        page.content = "Edited by editor"
        page.last_modified_by = editor
        page.save()
        assert page.version_history.get(version_number=2).author == editor

    def test_revert_to_existing_version(self, create_page):
        page = create_page(title="Original title")
        page.title = "Changed title"
        page.content = "Changed content"
        page.save()

        page.revert(1)

        page.refresh_from_db()
        assert page.title == "Original title"
        assert page.content == "Original content"
        latest = page.version_history.last()
        assert latest.version_number == 3
        assert latest.changes == "Reverted to version 1"

    def test_revert_to_missing_version_leaves_page_untouched(self, create_page):
        from content.models import PageVersion
        page = create_page()

        with pytest.raises(PageVersion.DoesNotExist):
            page.revert(99)

        page.refresh_from_db()
        assert page.content == "Original content"
        assert page.current_version == 2
        assert page.version_history.count() == 1


@pytest.mark.django_db
class TestPageFields:

    def test_meta_title_and_description_derived(self, create_page):
        title = "T" * 70
        excerpt = "E" * 200
        page = create_page(title=title, excerpt=excerpt)
        assert page.seo_meta_title == title[:60]
        assert page.seo_meta_description == excerpt[:160]

    def test_explicit_meta_title_kept(self, create_page):
        page = create_page(seo_meta_title="Custom meta")
        assert page.seo_meta_title == "Custom meta"

    def test_invalid_slug_rejected(self, create_page):
        with pytest.raises(ValidationError) as exc:
            create_page(slug="Bad Slug!")
        assert 'slug' in exc.value.message_dict

    def test_slug_lowercased(self, create_page):
        page = create_page(slug="Our-Services")
        assert page.slug == "our-services"

    def test_scheduled_for_must_be_future(self, create_page):
        with pytest.raises(ValidationError) as exc:
            create_page(status='scheduled', scheduled_for=timezone.now() - timedelta(hours=1))
        assert 'scheduled_for' in exc.value.message_dict

    def test_past_schedule_not_rechecked_when_unchanged(self, create_page):
        from content.models import Page
        page = create_page(status='scheduled', scheduled_for=timezone.now() + timedelta(days=1))
        Page.objects.filter(pk=page.pk).update(scheduled_for=timezone.now() - timedelta(days=1))

        page = Page.objects.get(pk=page.pk)
        page.title = "Still scheduled"
        page.save()

    def test_sections_defaults_and_unique_ids(self, create_page):
        page = create_page(sections=[{'id': 'hero-1', 'type': 'hero', 'title': 'Welcome'}])
        assert page.sections[0]['order'] == 0
        assert page.sections[0]['is_visible'] is True

        with pytest.raises(ValidationError):
            create_page(
                slug="duplicate-sections",
                sections=[{'id': 's1', 'type': 'hero'}, {'id': 's1', 'type': 'cta'}],
            )

    def test_invalid_section_type(self, create_page):
        with pytest.raises(ValidationError):
            create_page(sections=[{'id': 's1', 'type': 'carousel'}])

    def test_invalid_allowed_role(self, create_page):
        with pytest.raises(ValidationError) as exc:
            create_page(allowed_roles=['admin', 'superhero'])
        assert 'allowed_roles' in exc.value.message_dict

    def test_bounce_rate_range(self, create_page):
        with pytest.raises(ValidationError) as exc:
            create_page(bounce_rate=150)
        assert 'bounce_rate' in exc.value.message_dict

    def test_url_and_read_time(self, create_page):
        page = create_page(content=" ".join(["word"] * 401))
        assert page.url == "/pages/about-us"
        assert page.read_time == 3


@pytest.mark.django_db
class TestPageOperations:

    def test_update_analytics(self, create_page):
        page = create_page()
        page.update_analytics(page_views=10, bounce_rate=42.5)
        page.refresh_from_db()
        assert page.page_views == 10
        assert page.bounce_rate == 42.5
        assert page.last_analytics_update is not None

    def test_update_analytics_unknown_field(self, create_page):
        page = create_page()
        with pytest.raises(ValueError):
            page.update_analytics(title="nope")

    def test_add_related_page(self, create_page):
        page = create_page()
        other = create_page(slug="services", title="Services")
        page.add_related_page(other)
        assert list(page.related_pages.all()) == [other]
        assert not other.related_pages.exists()

    def test_toggle_comments(self, create_page):
        page = create_page()
        page.toggle_comments(True)
        page.refresh_from_db()
        assert page.enable_comments is True


@pytest.mark.django_db
class TestPageQueries:

    def test_published(self, create_page):
        from content.models import Page
        live = create_page(slug="live", status='published')
        create_page(slug="draft")
        assert list(Page.objects.published()) == [live]

    def test_by_page_type(self, create_page):
        from content.models import Page
        blog = create_page(slug="news", page_type='blog')
        create_page(slug="landing", page_type='landing')
        assert list(Page.objects.by_page_type('blog')) == [blog]

    def test_by_tag(self, create_page):
        from content.models import Page
        tagged = create_page(slug="herbal", tags=['wellness', 'herbal'])
        create_page(slug="other", tags=['news'])
        assert list(Page.objects.by_tag('wellness')) == [tagged]
        assert not Page.objects.by_tag('missing').exists()

    def test_home_page(self, create_page):
        from content.models import Page
        assert Page.objects.home_page() is None
        home = create_page(slug="home", is_home_page=True)
        assert Page.objects.home_page() == home

    def test_increment_page_view(self, create_page):
        from content.models import Page
        page = create_page()
        updated = Page.objects.increment_page_view(page.pk)
        updated = Page.objects.increment_page_view(page.pk)
        assert updated.page_views == 2
        assert Page.objects.increment_page_view(page.pk + 1000) is None

    def test_child_pages(self, create_page):
        parent = create_page(slug="services")
        child = create_page(slug="acupuncture", parent_page=parent)
        assert list(parent.child_pages.all()) == [child]


@pytest.mark.django_db
class TestTags:

    def test_slug_lowercased_and_fields_trimmed(self):
        from content.models import Tag
        tag = Tag.objects.create(name="  Herbal Medicine ", slug=" Herbal-Medicine ")
        assert tag.name == "Herbal Medicine"
        assert tag.slug == "herbal-medicine"
        assert tag.color == "#000000"

    def test_unique_name(self):
        from content.models import Tag
        Tag.objects.create(name="Yoga", slug="yoga")
        with pytest.raises(ValidationError):
            Tag.objects.create(name="Yoga", slug="yoga-2")

    def test_active(self):
        from content.models import Tag
        active = Tag.objects.create(name="Yoga", slug="yoga")
        Tag.objects.create(name="Old", slug="old", is_active=False)
        assert list(Tag.objects.active()) == [active]


@pytest.mark.django_db
class TestSerializers:

    def test_page_serializer_includes_derived_fields(self, create_page):
        from content.serializers import PageSerializer
        page = create_page(status='published', access_password='letmein')
        data = PageSerializer(page).data
        assert data['url'] == "/pages/about-us"
        assert data['read_time'] == 1
        assert data['is_published'] is True
        assert 'access_password' not in data
        assert [v['version_number'] for v in data['version_history']] == [1]

    def test_tag_serializer(self):
        from content.models import Tag
        from content.serializers import TagSerializer
        tag = Tag.objects.create(name="Yoga", slug="yoga")
        data = TagSerializer(tag).data
        assert data['slug'] == "yoga"
        assert data['color'] == "#000000"
