"""
Main URL Router for the Picnic localized portal
================================================

Page URLs live under a locale prefix (/{lang}/...), enforced by
portal.middleware.LocaleRedirectMiddleware. Locale-less routes:
- /                 root redirect to the vote portal
- /i18n/switch/     language switch
- /api/...          JSON endpoints
- /sitemap.xml      localized sitemap
"""

from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.contrib.sitemaps.views import sitemap

from portal.sitemaps import LocalizedPortalSitemap

sitemaps = {
    'portals': LocalizedPortalSitemap,
}

urlpatterns = [
    path('sitemap.xml', sitemap, {'sitemaps': sitemaps},
         name='django.contrib.sitemaps.views.sitemap'),
    path('', include('portal.urls')),
]

# Serve static files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
