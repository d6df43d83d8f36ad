"""
Password hashers for CMS user accounts.
"""
from django.contrib.auth.hashers import BCryptPasswordHasher


class BCryptCost10PasswordHasher(BCryptPasswordHasher):
    """Plain bcrypt with a cost factor of 10."""
    rounds = 10
