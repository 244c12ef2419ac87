"""
Seed the staff accounts needed to work the ticket queue.

Usage:
    python manage.py seed_staff
    python manage.py seed_staff --admin-email boss@example.com --admin-password s3cret
    python manage.py seed_staff --reset-passwords  # Rotate passwords of existing accounts
"""
import os
from django.core.management.base import BaseCommand
from django.contrib.auth import get_user_model

User = get_user_model()


class Command(BaseCommand):
    help = 'Create the default Admin and Technician accounts (idempotent)'

    def add_arguments(self, parser):
        parser.add_argument('--admin-email', default='admin@ticketing.com')
        parser.add_argument('--admin-password', default=os.getenv('SEED_ADMIN_PASSWORD', 'admin123'))
        parser.add_argument('--tech-email', default='tech@ticketing.com')
        parser.add_argument('--tech-password', default=os.getenv('SEED_TECH_PASSWORD', 'tech123'))
        parser.add_argument('--reset-passwords', action='store_true', help='Set the given passwords on accounts that already exist')

    def handle(self, *args, **options):
        accounts = [
            {
                'email': options['admin_email'],
                'password': options['admin_password'],
                'name': 'Admin User',
                'role': User.Role.ADMIN,
                'is_staff': True,
            },
            {
                'email': options['tech_email'],
                'password': options['tech_password'],
                'name': 'John Technician',
                'role': User.Role.TECHNICIAN,
                'is_staff': False,
            },
        ]

        for account in accounts:
            password = account.pop('password')
            email = account.pop('email')

            user, created = User.objects.get_or_create(email=email, defaults=account)
            if created:
                user.set_password(password)
                user.save(update_fields=['password'])
                self.stdout.write(self.style.SUCCESS(f'  Created {user.role.lower()}: {email}'))
                continue

            if options['reset_passwords']:
                user.set_password(password)
                user.save(update_fields=['password'])
                self.stdout.write(f'  Password reset: {email}')
            else:
                self.stdout.write(f'  User exists: {email}')

        self.stdout.write(self.style.SUCCESS('Staff accounts ready'))
