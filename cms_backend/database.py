"""
Database connection manager.

Resolves a connection string and option set per environment name
(development / production / test), opens the shared connection and closes it
again. Connection failures are fatal: they are logged and the process exits.
"""
import logging
import os
import sys
from pathlib import Path

import dj_database_url
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError, connections
from django.db.backends.signals import connection_created
from django.dispatch import receiver

logger = logging.getLogger(__name__)

_project_root = Path(__file__).resolve().parent.parent

DATABASE_CONFIG = {
    'development': {
        'url': os.getenv('DATABASE_URL', 'postgres://localhost:5432/tamamlayici_saglik_cms'),
        'options': {
            'conn_max_age': 600,
            'conn_health_checks': True,
        },
    },
    'production': {
        'url': os.getenv('DATABASE_URL'),
        'options': {
            'conn_max_age': 600,
            'conn_health_checks': True,
            'ssl_require': True,
        },
    },
    'test': {
        'url': os.getenv('TEST_DATABASE_URL', f"sqlite:///{_project_root / 'test.sqlite3'}"),
        'options': {},
    },
}


def database_settings(environment='development'):
    """Build the Django DATABASES entry for *environment*."""
    config = DATABASE_CONFIG.get(environment)
    if config is None:
        raise ImproperlyConfigured(f"Unknown database environment: {environment}")
    if not config['url']:
        raise ImproperlyConfigured(f"Database URL not configured for {environment} environment")
    return dj_database_url.parse(config['url'], **config['options'])


def connect_db(environment=None, alias='default'):
    """
    Open the shared connection for *alias* and return its wrapper.

    The environment is fixed when settings load (CMS_ENVIRONMENT); asking for
    a different one, or for one without a configured URL, is fatal.
    """
    from django.conf import settings

    environment = environment or settings.CMS_ENVIRONMENT
    try:
        database_settings(environment)
        if environment != settings.CMS_ENVIRONMENT:
            raise ImproperlyConfigured(
                f"Settings are loaded for the {settings.CMS_ENVIRONMENT} environment, not {environment}"
            )
        connection = connections[alias]
        connection.ensure_connection()
    except (ImproperlyConfigured, DatabaseError) as e:
        logger.error(f"Failed to connect to database: {e}")
        sys.exit(1)

    logger.info(f"Database connected successfully in {environment} environment")
    return connection


def disconnect_db():
    """Close every open connection held by this process."""
    try:
        connections.close_all()
    except DatabaseError as e:
        logger.error(f"Failed to disconnect from database: {e}")
        sys.exit(1)
    logger.info("Database disconnected successfully")


@receiver(connection_created)
def log_connection_created(sender, connection, **kwargs):
    logger.debug(f"Opened {connection.vendor} connection '{connection.alias}'")
