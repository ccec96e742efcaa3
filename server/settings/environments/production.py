"""Overriding settings for production."""

from server.settings.components import config

DEBUG = False

ALLOWED_HOSTS = config(
    'DJANGO_ALLOWED_HOSTS',
    cast=lambda hosts: [host.strip() for host in hosts.split(',')],
    default='',
)

SECURE_CONTENT_TYPE_NOSNIFF = True

# No fallback key outside of development:
SECRET_KEY = config('DJANGO_SECRET_KEY')
