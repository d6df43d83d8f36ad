"""
Validators for the nested lists stored on media records.
"""
from django.core.exceptions import ValidationError

THUMBNAIL_SIZES = ['small', 'medium', 'large', 'xlarge']
RELATED_CONTENT_TYPES = ['article', 'page', 'product', 'blog', 'other']


def validate_thumbnails(value):
    if not isinstance(value, list):
        raise ValidationError('Thumbnails must be a list.')
    for index, thumbnail in enumerate(value):
        if not isinstance(thumbnail, dict):
            raise ValidationError(f'Thumbnail {index} must be an object.')
        if thumbnail.get('size') not in THUMBNAIL_SIZES:
            raise ValidationError(f"Thumbnail {index} has an invalid size: {thumbnail.get('size')}")
        if not thumbnail.get('url'):
            raise ValidationError(f'Thumbnail {index} is missing a url.')


def validate_related_content(value):
    if not isinstance(value, list):
        raise ValidationError('Related content must be a list.')
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise ValidationError(f'Related content {index} must be an object.')
        content_type = item.get('content_type')
        if content_type is not None and content_type not in RELATED_CONTENT_TYPES:
            raise ValidationError(f'Related content {index} has an invalid type: {content_type}')
