"""
WSGI config for the Picnic localized portal
===========================================

Exposes the WSGI callable as a module-level variable named ``application``.
Async views (portal guards) run through Django's async adapter under WSGI;
prefer picnic_project.asgi in production.
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'picnic_project.settings')

application = get_wsgi_application()
