"""
Tests for library app - media records, soft delete and counters.
"""
import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError


@pytest.fixture
def uploader():
    return get_user_model().objects.create_user(
        username="uploader",
        email="uploader@example.com",
        password="testpass123",
        first_name="Media",
        last_name="Uploader",
    )


@pytest.fixture
def create_media(uploader):
    def _create_media(title="Clinic photo", **kwargs):
        from library.models import Media
        defaults = {
            'filename': 'clinic.jpg',
            'original_name': 'Clinic.JPG',
            'file_size': 2048,
            'mime_type': 'image/jpeg',
            'file_extension': 'JPG',
            'url': '/uploads/clinic.jpg',
            'upload_path': 'uploads/clinic.jpg',
            'media_type': 'image',
        }
        defaults.update(kwargs)
        return Media.objects.create(title=title, uploaded_by=uploader, **defaults)
    return _create_media


@pytest.mark.django_db
class TestMediaSave:

    def test_tags_normalised(self, create_media):
        media = create_media(tags=[' Wellness ', 'WELLNESS', 'Yoga', ''])
        media.refresh_from_db()
        assert media.tags == ['wellness', 'yoga']

    def test_extension_lowercased(self, create_media):
        media = create_media()
        assert media.file_extension == 'jpg'

    def test_defaults(self, create_media):
        media = create_media()
        assert media.status == 'pending'
        assert media.storage_service == 'local'
        assert media.is_active and media.is_public
        assert (media.views, media.downloads, media.shares) == (0, 0, 0)

    def test_image_dimensions_must_be_positive(self, create_media):
        with pytest.raises(ValidationError) as exc:
            create_media(image_width=0, image_height=600)
        assert 'Image width must be greater than 0' in exc.value.messages

        with pytest.raises(ValidationError) as exc:
            create_media(image_width=800, image_height=-1)
        assert 'Image height must be greater than 0' in exc.value.messages

    def test_image_without_dimensions_allowed(self, create_media):
        media = create_media()
        assert media.image_width is None

    def test_dimensions_ignored_for_documents(self, create_media):
        media = create_media(
            title="Brochure",
            mime_type='application/pdf',
            file_extension='pdf',
            media_type='document',
            image_width=0,
        )
        assert media.pk is not None

    def test_unknown_mime_type_rejected(self, create_media):
        with pytest.raises(ValidationError) as exc:
            create_media(mime_type='image/bmp')
        assert 'mime_type' in exc.value.message_dict

    def test_invalid_thumbnail_size_rejected(self, create_media):
        with pytest.raises(ValidationError) as exc:
            create_media(thumbnails=[{'size': 'huge', 'url': '/t/huge.jpg'}])
        assert 'thumbnails' in exc.value.message_dict


@pytest.mark.django_db
class TestSoftDelete:

    def test_soft_deleted_media_hidden_from_default_manager(self, create_media, uploader):
        from library.models import Media
        media = create_media()

        media.soft_delete(uploader)

        assert not Media.objects.filter(pk=media.pk).exists()
        assert Media.all_objects.filter(pk=media.pk).exists()
        media.refresh_from_db()
        assert media.is_active is False
        assert media.deleted_by == uploader
        assert media.deleted_at is not None

    def test_soft_deleted_media_excluded_from_queries(self, create_media, uploader):
        from library.models import Media
        media = create_media(category='gallery', status='approved', tags=['yoga'])
        media.soft_delete(uploader)

        assert not Media.objects.by_category('gallery').exists()
        assert not Media.objects.public().exists()
        assert not Media.objects.search('yoga').exists()

    def test_restore(self, create_media, uploader):
        from library.models import Media
        media = create_media()
        media.soft_delete(uploader)

        media.restore()

        assert Media.objects.filter(pk=media.pk).exists()
        media.refresh_from_db()
        assert media.deleted_by is None
        assert media.deleted_at is None


@pytest.mark.django_db
class TestCounters:

    def test_increment_views(self, create_media):
        from library.models import Media
        media = create_media()
        media.increment_views()
        media.increment_views()
        assert media.views == 2
        assert Media.objects.get(pk=media.pk).views == 2

    def test_increment_downloads_and_shares(self, create_media):
        media = create_media()
        media.increment_downloads()
        media.increment_shares()
        media.refresh_from_db()
        assert media.downloads == 1
        assert media.shares == 1

    def test_increments_from_stale_copies_are_not_lost(self, create_media):
        from library.models import Media
        media = create_media()
        first = Media.objects.get(pk=media.pk)
        second = Media.objects.get(pk=media.pk)
        first.increment_views()
        second.increment_views()
        assert second.views == 2


@pytest.mark.django_db
class TestMediaQueries:

    def test_by_category(self, create_media):
        from library.models import Media
        hero = create_media(title="Hero banner", category='hero')
        create_media(title="Avatar", category='profile')
        assert list(Media.objects.by_category('hero')) == [hero]

    def test_public_requires_approved_status(self, create_media):
        from library.models import Media
        approved = create_media(title="Approved", status='approved')
        create_media(title="Pending")
        create_media(title="Private", status='approved', is_public=False)
        assert list(Media.objects.public()) == [approved]

    def test_search_matches_title_description_and_tags(self, create_media):
        from library.models import Media
        by_title = create_media(title="Yoga studio")
        by_description = create_media(title="Room", description="Morning YOGA class")
        by_tag = create_media(title="Mat", tags=['Yoga'])
        create_media(title="Reception")

        results = set(Media.objects.search('yoga'))
        assert results == {by_title, by_description, by_tag}

    def test_newest_first(self, create_media):
        from library.models import Media
        older = create_media(title="Older", category='gallery')
        newer = create_media(title="Newer", category='gallery')
        assert list(Media.objects.by_category('gallery')) == [newer, older]


class TestVirtuals:

    def test_readable_file_size(self):
        from library.models import Media
        assert Media(file_size=0).readable_file_size == "0 Bytes"
        assert Media(file_size=512).readable_file_size == "512 Bytes"
        assert Media(file_size=1536).readable_file_size == "1.5 KB"
        assert Media(file_size=5 * 1024 * 1024).readable_file_size == "5 MB"

    def test_readable_file_size_large_values_not_in_exponent_form(self):
        from library.models import Media
        assert Media(file_size=1234567 * 1024 ** 3).readable_file_size == "1234567 GB"
        assert Media(file_size=2 ** 60).readable_file_size == "1073741824 GB"
        assert Media(file_size=int(2.25 * 1024 ** 4)).readable_file_size == "2304 GB"
        assert Media(file_size=1234).readable_file_size == "1.21 KB"

    def test_icon(self):
        from library.models import Media
        assert Media(media_type='video').icon == '🎥'
        assert Media(media_type='document').icon == '📄'
        assert Media(media_type='unknown').icon == '📦'


@pytest.mark.django_db
class TestSerializersAndAdmin:

    def test_media_serializer_includes_virtuals(self, create_media):
        from library.serializers import MediaSerializer
        data = MediaSerializer(create_media()).data
        assert data['readable_file_size'] == "2 KB"
        assert data['icon'] == '🖼️'
        assert data['tags'] == []

    def test_admin_lists_soft_deleted_media(self, client, create_media, uploader):
        media = create_media(title="Removed photo")
        media.soft_delete(uploader)
        admin_user = get_user_model().objects.create_superuser(
            username="siteadmin",
            email="admin@example.com",
            password="adminpass1",
            first_name="Site",
            last_name="Admin",
        )
        client.force_login(admin_user)

        response = client.get('/admin/library/media/')
        assert response.status_code == 200
        assert b"Removed photo" in response.content
