"""
Tests for configuration app - the site settings singleton.
"""
from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.management import call_command


@pytest.fixture
def build_settings():
    def _build_settings(**kwargs):
        from configuration.models import SiteSettings
        defaults = {
            'site_title': 'Tamamlayıcı Sağlık',
            'site_description': 'Complementary and integrative medicine clinic',
            'facility_name': 'Tamamlayıcı Sağlık Merkezi',
            'contact_email': 'info@example.com',
        }
        defaults.update(kwargs)
        return SiteSettings(**defaults)
    return _build_settings


@pytest.mark.django_db
class TestSiteSettingsValidation:

    def test_requires_email_or_phone(self, build_settings):
        site_settings = build_settings(contact_email='', contact_phone='')
        with pytest.raises(ValidationError) as exc:
            site_settings.save()
        assert 'At least email or phone contact information must be provided' in exc.value.messages

    def test_phone_alone_is_enough(self, build_settings):
        site_settings = build_settings(contact_email='', contact_phone='+90 212 555 0000')
        site_settings.save()
        assert site_settings.pk == 1

    def test_password_min_length_floor(self, build_settings):
        with pytest.raises(ValidationError) as exc:
            build_settings(password_min_length=5).save()
        assert 'Password minimum length must be at least 6 characters' in exc.value.messages

    def test_image_quality_range(self, build_settings):
        with pytest.raises(ValidationError) as exc:
            build_settings(image_quality=0).save()
        assert 'Image quality must be between 1 and 100' in exc.value.messages

        with pytest.raises(ValidationError):
            build_settings(image_quality=101).save()

    def test_site_description_length(self, build_settings):
        with pytest.raises(ValidationError) as exc:
            build_settings(site_description="x" * 161).save()
        assert 'site_description' in exc.value.message_dict

    def test_defaults(self, build_settings):
        site_settings = build_settings()
        site_settings.save()
        assert site_settings.address_country == 'Turkey'
        assert site_settings.max_file_upload_size == 50 * 1024 * 1024
        assert site_settings.session_timeout == 3600
        assert site_settings.image_quality == 80
        assert site_settings.password_min_length == 8
        assert site_settings.languages == ['Turkish', 'English']
        assert site_settings.theme == 'light'


@pytest.mark.django_db
class TestSiteSettingsSingleton:

    def test_load_before_first_save(self):
        from configuration.models import SiteSettings
        with pytest.raises(SiteSettings.DoesNotExist):
            SiteSettings.load()

    def test_second_instance_overwrites_the_first(self, build_settings):
        from configuration.models import SiteSettings
        first = build_settings()
        first.save()

        second = build_settings(site_title='Renamed clinic')
        second.save()

        assert SiteSettings.objects.count() == 1
        loaded = SiteSettings.load()
        assert loaded.site_title == 'Renamed clinic'
        assert loaded.created_at == first.created_at

    def test_record_update(self, build_settings):
        from configuration.models import SiteSettings
        user = get_user_model().objects.create_user(
            username="admin",
            email="admin@example.com",
            password="testpass123",
            first_name="Site",
            last_name="Admin",
        )
        site_settings = build_settings()
        site_settings.save()

        site_settings.maintenance_mode = True
        site_settings.record_update(user, 'Enabled maintenance mode')

        loaded = SiteSettings.load()
        assert loaded.maintenance_mode is True
        assert loaded.last_updated_by == user
        assert len(loaded.update_history) == 1
        assert loaded.update_history[0]['updated_by'] == user.pk
        assert loaded.update_history[0]['changes'] == 'Enabled maintenance mode'


@pytest.mark.django_db(transaction=True)
class TestCheckDatabaseCommand:

    def test_check_database(self):
        out = StringIO()
        call_command('check_database', stdout=out)
        assert 'Database connection OK.' in out.getvalue()


@pytest.mark.django_db
class TestSiteSettingsSerializer:

    def test_serializer(self, build_settings):
        from configuration.serializers import SiteSettingsSerializer
        site_settings = build_settings()
        site_settings.save()
        data = SiteSettingsSerializer(site_settings).data
        assert data['id'] == 1
        assert data['contact_email'] == 'info@example.com'
        assert data['update_history'] == []
