"""
User account models.
"""
import hashlib
import logging
import secrets
from datetime import timedelta

from django.contrib.auth.hashers import acheck_password, check_password, identify_hasher
from django.contrib.auth.models import AbstractUser, UserManager
from django.core.exceptions import ValidationError
from django.core.validators import MaxLengthValidator, MinLengthValidator
from django.db import models
from django.utils import timezone
from django.utils.crypto import constant_time_compare

from cms_backend.persistence import DocumentModel

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 6
PASSWORD_RESET_TOKEN_LIFETIME = timedelta(minutes=30)

# Never part of a public profile
SECRET_FIELDS = ('password', 'verification_token', 'password_reset_token', 'password_reset_expires')


def _is_password_hash(value):
    try:
        identify_hasher(value)
    except ValueError:
        return False
    return True


class CMSUserManager(UserManager):

    def _create_user(self, username, email, password, **extra_fields):
        if not username:
            raise ValueError("The given username must be set")
        user = self.model(
            username=self.model.normalize_username(username),
            email=self.normalize_email(email),
            **extra_fields,
        )
        if password is None:
            user.set_unusable_password()
        else:
            user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault('role', 'admin')
        return super().create_superuser(username, email=email, password=password, **extra_fields)


class User(DocumentModel, AbstractUser):
    """
    CMS user account.
    Passwords assigned as plaintext are hashed (bcrypt, cost 10) on save.
    """
    ROLE_CHOICES = [
        ('user', 'User'),
        ('admin', 'Admin'),
        ('moderator', 'Moderator'),
    ]

    username = models.CharField(
        max_length=30,
        unique=True,
        validators=[MinLengthValidator(3, 'Username must be at least 3 characters long')],
        error_messages={'unique': 'A user with that username already exists.'},
    )
    email = models.EmailField(
        unique=True,
        error_messages={'unique': 'A user with that email address already exists.'},
    )
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='user')
    email_verified = models.BooleanField(default=False)
    verification_token = models.CharField(max_length=255, blank=True, null=True)
    password_reset_token = models.CharField(
        max_length=64,
        blank=True,
        null=True,
        help_text="SHA-256 hash of the reset token sent to the user"
    )
    password_reset_expires = models.DateTimeField(blank=True, null=True)
    profile_image = models.CharField(max_length=500, blank=True, null=True)
    bio = models.TextField(
        blank=True,
        null=True,
        validators=[MaxLengthValidator(500, 'Bio cannot exceed 500 characters')]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CMSUserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['username', 'first_name', 'last_name']

    class Meta:
        db_table = 'users'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['email']),
            models.Index(fields=['username']),
            models.Index(fields=['is_active']),
        ]

    def __str__(self):
        return self.email

    def pre_commit(self):
        self.username = (self.username or '').strip()
        self.email = (self.email or '').strip().lower()
        self.first_name = (self.first_name or '').strip()
        self.last_name = (self.last_name or '').strip()

        if self._password_needs_hashing():
            if len(self.password) < PASSWORD_MIN_LENGTH:
                raise ValidationError(
                    {'password': f'Password must be at least {PASSWORD_MIN_LENGTH} characters long'}
                )
            self.set_password(self.password)

    def _password_needs_hashing(self):
        if not self.password or not self.is_modified('password'):
            return False
        # Only the marker produced by set_unusable_password() is kept as is
        if self.password == getattr(self, '_unusable_password', None):
            return False
        return not _is_password_hash(self.password)

    def set_unusable_password(self):
        super().set_unusable_password()
        self._unusable_password = self.password

    def compare_password(self, candidate):
        """Check *candidate* against the stored hash."""
        return check_password(candidate, self.password)

    async def acompare_password(self, candidate):
        return await acheck_password(candidate, self.password)

    def get_public_profile(self):
        """User details without password or token fields."""
        from .serializers import UserSerializer
        return dict(UserSerializer(self).data)

    def generate_password_reset_token(self):
        """
        Create a password reset token.
        Only its SHA-256 hash is kept on the user, valid for 30 minutes.
        Returns the plaintext token for out-of-band delivery; the caller saves.
        """
        reset_token = secrets.token_hex(32)
        self.password_reset_token = hashlib.sha256(reset_token.encode()).hexdigest()
        self.password_reset_expires = timezone.now() + PASSWORD_RESET_TOKEN_LIFETIME
        logger.info(f"Password reset token generated for user {self.pk}")
        return reset_token

    def verify_password_reset_token(self, token):
        """Check a plaintext reset token against the stored hash and expiry."""
        if not token or not self.password_reset_token or not self.password_reset_expires:
            return False
        if timezone.now() >= self.password_reset_expires:
            return False
        return constant_time_compare(
            hashlib.sha256(token.encode()).hexdigest(),
            self.password_reset_token,
        )

    def clear_password_reset_token(self):
        self.password_reset_token = None
        self.password_reset_expires = None
