"""
Shared write path for the CMS document models.

Every model saves through the same steps:
  1. pre_commit(): normalise fields and fill in derived values
  2. full_clean(): declarative field validation plus the model's clean()
  3. insert/update

Values loaded from the database are remembered so models can tell which
fields a caller changed (is_modified).
"""
import copy

from django.core.exceptions import NON_FIELD_ERRORS
from django.db import models


def field_violations(error):
    """Flatten a ValidationError into a list of {'field', 'message'} records."""
    if hasattr(error, 'error_dict'):
        return [
            {'field': field, 'message': message}
            for field, messages in error.message_dict.items()
            for message in messages
        ]
    return [{'field': NON_FIELD_ERRORS, 'message': message} for message in error.messages]


def normalize_tags(tags):
    """Trim and lower-case tags, dropping duplicates but keeping first-seen order."""
    normalized = []
    for tag in tags or []:
        tag = str(tag).strip().lower()
        if tag and tag not in normalized:
            normalized.append(tag)
    return normalized


class DocumentModel(models.Model):
    """Abstract base giving models an explicit pre-commit + validation write path."""

    class Meta:
        abstract = True

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_values = {
            name: copy.deepcopy(value) for name, value in zip(field_names, values)
        }
        return instance

    def _remember_loaded(self, fields=None):
        loaded = getattr(self, '_loaded_values', {})
        deferred = self.get_deferred_fields()
        for field in self._meta.concrete_fields:
            if field.attname in deferred:
                continue
            if fields is None or field.name in fields or field.attname in fields:
                loaded[field.attname] = copy.deepcopy(getattr(self, field.attname))
        self._loaded_values = loaded

    def is_modified(self, field_name):
        """
        True when *field_name* differs from what was last loaded or saved.
        A deferred field counts as unmodified until it is assigned.
        """
        if self._state.adding:
            return True
        field = self._meta.get_field(field_name)
        loaded = getattr(self, '_loaded_values', {})
        if field.attname not in loaded:
            return field.attname not in self.get_deferred_fields()
        return getattr(self, field.attname) != loaded[field.attname]

    def pre_commit(self):
        """Hook for save-time normalisation. Runs before validation."""

    def save(self, *args, **kwargs):
        self.pre_commit()
        self.full_clean()
        super().save(*args, **kwargs)
        self._remember_loaded()

    def refresh_from_db(self, using=None, fields=None, **kwargs):
        super().refresh_from_db(using=using, fields=fields, **kwargs)
        self._remember_loaded(fields)
