"""
Management command to verify database connectivity.
Usage: python manage.py check_database [--environment production]
"""
from django.core.management.base import BaseCommand

from cms_backend.database import connect_db, disconnect_db


class Command(BaseCommand):
    help = 'Open and close the database connection for the configured environment'

    def add_arguments(self, parser):
        parser.add_argument(
            '--environment',
            choices=['development', 'production', 'test'],
            help='Environment to check (defaults to CMS_ENVIRONMENT)',
        )
        parser.add_argument('--database', default='default', help='Connection alias')

    def handle(self, *args, **options):
        connection = connect_db(options['environment'], alias=options['database'])
        self.stdout.write(f'Connected: {connection.vendor} ({connection.alias})')
        disconnect_db()
        self.stdout.write(self.style.SUCCESS('Database connection OK.'))
