from django.contrib.sitemaps import Sitemap
from django.urls import reverse
from django.conf import settings

from .languages import default_language, supported_languages
from .paths import localize

# Portal pages anyone can reach without signing in
PUBLIC_VIEWS = ['portal:vote_podium', 'portal:media_landing']


def build_url(path):
    return f"{settings.SITE_URL}{path}"


class LocalizedPortalSitemap(Sitemap):
    """
    Every public portal page, once per supported language.

    URLs are reversed under the default locale and then re-targeted, so
    each language entry differs only in its prefix.
    """
    priority = 0.8
    changefreq = 'daily'

    def items(self):
        # (view_name, lang_code) tuples
        return [
            (view, lang)
            for view in PUBLIC_VIEWS
            for lang in supported_languages()
        ]

    def location(self, item):
        view_name, lang_code = item
        default = default_language()
        path = reverse(view_name, kwargs={'lang': default})
        return localize(path, default, lang_code)

    def get_urls(self, page=1, site=None, protocol=None):
        # Absolute URLs come from SITE_URL rather than the sites framework
        urls = []
        for item in self.paginator.page(page).object_list:
            urls.append({
                'item': item,
                'location': build_url(self.location(item)),
                'lastmod': None,
                'changefreq': self.changefreq,
                'priority': str(self.priority),
                'alternates': [],
            })
        return urls
