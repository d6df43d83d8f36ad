"""
Tests for accounts app - password handling, public profile and reset tokens.
"""
import hashlib
from datetime import timedelta

import pytest
from asgiref.sync import async_to_sync
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.utils import timezone


@pytest.fixture
def user_model():
    return get_user_model()


@pytest.fixture
def create_user(user_model):
    def _create_user(email="test@example.com", username="testuser", password="testpass123"):
        return user_model.objects.create_user(
            username=username,
            email=email,
            password=password,
            first_name="Test",
            last_name="User",
        )
    return _create_user


@pytest.mark.django_db
class TestPasswordHashing:

    def test_password_is_hashed_with_bcrypt(self, create_user):
        user = create_user()
        assert user.password != "testpass123"
        assert user.password.startswith("bcrypt$")
        assert user.compare_password("testpass123")
        assert not user.compare_password("wrongpass")

    def test_hash_unchanged_when_resaved_without_password_change(self, create_user, user_model):
        user = create_user()
        stored = user.password

        user.bio = "Updated bio"
        user.save()

        reloaded = user_model.objects.get(pk=user.pk)
        reloaded.first_name = "Changed"
        reloaded.save()

        reloaded.refresh_from_db()
        assert reloaded.password == stored

    def test_plaintext_assignment_is_hashed_on_save(self, create_user, user_model):
        user = create_user()
        user = user_model.objects.get(pk=user.pk)

        user.password = "newsecret1"
        user.save()

        user.refresh_from_db()
        assert user.password != "newsecret1"
        assert user.compare_password("newsecret1")
        assert not user.compare_password("testpass123")

    def test_plaintext_starting_with_bang_is_hashed(self, create_user, user_model):
        user = create_user()
        user = user_model.objects.get(pk=user.pk)

        user.password = "!Secret123"
        user.save()

        user.refresh_from_db()
        assert user.password != "!Secret123"
        assert user.password.startswith("bcrypt$")
        assert user.compare_password("!Secret123")

    def test_unusable_password_kept(self, create_user, user_model):
        user = create_user()
        user.set_unusable_password()
        user.save()

        user = user_model.objects.get(pk=user.pk)
        assert not user.has_usable_password()
        user.bio = "No password login"
        user.save()
        user.refresh_from_db()
        assert not user.has_usable_password()

    def test_create_user_without_password(self, create_user):
        user = create_user(password=None)
        user.refresh_from_db()
        assert not user.has_usable_password()
        assert not user.compare_password("")

    def test_short_plaintext_password_rejected(self, create_user):
        user = create_user()
        user.password = "abc"
        with pytest.raises(ValidationError) as exc:
            user.save()
        assert 'password' in exc.value.message_dict

    def test_async_compare_password(self, create_user):
        user = create_user()
        assert async_to_sync(user.acompare_password)("testpass123") is True
        assert async_to_sync(user.acompare_password)("nope") is False


@pytest.mark.django_db
class TestUserFields:

    def test_email_lowercased_and_names_trimmed(self, user_model):
        user = user_model(
            username="  alice  ",
            email="Alice@Example.COM",
            first_name="  Alice ",
            last_name=" Smith  ",
            password="secret99",
        )
        user.save()
        user.refresh_from_db()
        assert user.email == "alice@example.com"
        assert user.username == "alice"
        assert user.first_name == "Alice"
        assert user.last_name == "Smith"

    def test_defaults(self, create_user):
        user = create_user()
        assert user.role == "user"
        assert user.is_active is True
        assert user.email_verified is False

    def test_username_too_short(self, create_user):
        with pytest.raises(ValidationError) as exc:
            create_user(username="ab")
        assert 'username' in exc.value.message_dict

    def test_duplicate_email_rejected(self, create_user):
        create_user()
        with pytest.raises(ValidationError) as exc:
            create_user(username="another")
        assert 'email' in exc.value.message_dict

    def test_missing_last_name_rejected(self, user_model):
        user = user_model(username="bob", email="bob@example.com", first_name="Bob", password="secret99")
        with pytest.raises(ValidationError) as exc:
            user.save()
        assert 'last_name' in exc.value.message_dict

    def test_superuser_defaults_to_admin_role(self, user_model):
        admin = user_model.objects.create_superuser(
            username="root",
            email="root@example.com",
            password="rootpass1",
            first_name="Root",
            last_name="Admin",
        )
        assert admin.role == "admin"
        assert admin.is_superuser


@pytest.mark.django_db
class TestPublicProfile:

    def test_public_profile_hides_secrets(self, create_user):
        user = create_user()
        user.verification_token = "verify-me"
        user.generate_password_reset_token()
        user.save()

        profile = user.get_public_profile()
        for field in ('password', 'verification_token', 'password_reset_token', 'password_reset_expires'):
            assert field not in profile
        assert profile['email'] == "test@example.com"
        assert profile['role'] == "user"


@pytest.mark.django_db
class TestPasswordResetToken:

    def test_generate_stores_hash_and_expiry(self, create_user):
        user = create_user()
        before = timezone.now()
        token = user.generate_password_reset_token()

        assert len(token) == 64
        assert user.password_reset_token == hashlib.sha256(token.encode()).hexdigest()
        assert user.password_reset_token != token
        expected = before + timedelta(minutes=30)
        assert abs((user.password_reset_expires - expected).total_seconds()) < 5

    def test_generate_does_not_persist(self, create_user, user_model):
        user = create_user()
        user.generate_password_reset_token()
        assert user_model.objects.get(pk=user.pk).password_reset_token is None

    def test_verify_token(self, create_user):
        user = create_user()
        token = user.generate_password_reset_token()
        user.save()

        assert user.verify_password_reset_token(token)
        assert not user.verify_password_reset_token("0" * 64)
        assert not user.verify_password_reset_token("")

    def test_expired_token_rejected(self, create_user):
        user = create_user()
        token = user.generate_password_reset_token()
        user.password_reset_expires = timezone.now() - timedelta(seconds=1)
        assert not user.verify_password_reset_token(token)

    def test_clear_token(self, create_user):
        user = create_user()
        token = user.generate_password_reset_token()
        user.clear_password_reset_token()
        assert user.password_reset_token is None
        assert user.password_reset_expires is None
        assert not user.verify_password_reset_token(token)
