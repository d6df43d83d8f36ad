"""
Validators for page content fields.
"""
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.utils import timezone
from django.utils.deconstruct import deconstructible

SECTION_TYPES = [
    'hero', 'content', 'features', 'cta', 'testimonial', 'gallery',
    'form', 'pricing', 'team', 'faq', 'newsletter', 'custom',
]

validate_page_slug = RegexValidator(
    r'^[a-z0-9]+(?:-[a-z0-9]+)*$',
    'Slug must contain only lowercase letters, numbers, and hyphens',
)


@deconstructible
class ChoiceListValidator:
    """Every item of a list value must be one of *choices*."""

    def __init__(self, choices):
        self.choices = list(choices)

    def __call__(self, value):
        if not isinstance(value, list):
            raise ValidationError('Must be a list.')
        invalid = [item for item in value if item not in self.choices]
        if invalid:
            raise ValidationError(
                'Invalid values: %(values)s',
                params={'values': ', '.join(map(str, invalid))},
            )

    def __eq__(self, other):
        return isinstance(other, ChoiceListValidator) and self.choices == other.choices


def validate_sections(value):
    if not isinstance(value, list):
        raise ValidationError('Sections must be a list.')
    seen = set()
    for index, section in enumerate(value):
        if not isinstance(section, dict):
            raise ValidationError(f'Section {index} must be an object.')
        section_id = section.get('id')
        if not section_id:
            raise ValidationError(f'Section {index} is missing an id.')
        if section_id in seen:
            raise ValidationError(f'Duplicate section id: {section_id}')
        seen.add(section_id)
        if section.get('type') not in SECTION_TYPES:
            raise ValidationError(f"Section {section_id} has an invalid type: {section.get('type')}")


def validate_future_datetime(value):
    if value and value <= timezone.now():
        raise ValidationError('Scheduled date must be in the future')
