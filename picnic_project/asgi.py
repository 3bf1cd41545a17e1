"""
ASGI config for the Picnic localized portal
===========================================

Exposes the ASGI callable as a module-level variable named ``application``.

Portal guards await their authorization check, so the site is meant to be
served over ASGI:
- Uvicorn
- Daphne
- Hypercorn
"""

import os
from django.core.asgi import get_asgi_application # pyright: ignore[reportMissingModuleSource]

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'picnic_project.settings')

application = get_asgi_application()
