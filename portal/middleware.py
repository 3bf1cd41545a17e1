"""
Locale routing middleware
=========================

Keeps every page URL under exactly one supported locale prefix:
- /kr/vote -> /ko/vote (mistyped country codes are corrected)
- /vote -> /{preferred}/vote (locale-less paths get the viewer's locale)
- /{lang}/auth/callback -> /auth/callback (OAuth providers register the
  locale-less callback URL)

Static files, API endpoints, the language switch endpoint and auth callbacks
pass through untouched. For every other request the resolved locale is
activated and stored on request.LANGUAGE_CODE.
"""

from django.utils.deprecation import MiddlewareMixin # pyright: ignore[reportMissingModuleSource]
from django.http import HttpResponseRedirect # pyright: ignore[reportMissingModuleSource]
from django.conf import settings # pyright: ignore[reportMissingModuleSource]
from django.utils import translation # pyright: ignore[reportMissingModuleSource]
import logging

from .languages import resolve, resolve_alias, split_locale
from .paths import localize

logger = logging.getLogger(__name__)


class LocaleRedirectMiddleware(MiddlewareMixin):
    """
    Enforce the locale prefix on page URLs.

    The preferred locale for locale-less paths is the language cookie when
    it holds a supported code, otherwise the default language.
    """

    EXEMPT_PREFIXES = ('/api/', '/i18n/', '/auth/', '/favicon', '/robots', '/sitemap')
    AUTH_CALLBACK_SEGMENT = '/auth/callback'

    def process_request(self, request):
        path = request.path_info
        preferred = resolve(request.COOKIES.get(settings.LANGUAGE_COOKIE_NAME))

        if self.is_exempt(path):
            request.LANGUAGE_CODE = preferred
            return None

        locale, remainder = split_locale(path)

        if locale is not None:
            # Auth callbacks are registered without a locale prefix
            if remainder.startswith(self.AUTH_CALLBACK_SEGMENT):
                target = self.with_query(request, remainder)
                logger.info(f"Locale removed from auth callback: {path} -> {remainder}")
                return HttpResponseRedirect(target)

            request.LANGUAGE_CODE = locale
            translation.activate(locale)
            return None

        first_segment = path.lstrip('/').split('/', 1)[0]
        alias = resolve_alias(first_segment)
        if alias:
            target = localize(path, first_segment, alias)
            logger.info(f"Locale alias redirect: {path} -> {target}")
            return HttpResponseRedirect(self.with_query(request, target))

        # Root is handled by the root view, which lands on the vote portal
        if path == '/':
            request.LANGUAGE_CODE = preferred
            translation.activate(preferred)
            return None

        target = localize(path, preferred, preferred)
        logger.debug(f"Locale prefix added: {path} -> {target}")
        return HttpResponseRedirect(self.with_query(request, target))

    def process_response(self, request, response):
        """Advertise the resolved locale."""
        if hasattr(request, 'LANGUAGE_CODE'):
            response.setdefault('Content-Language', request.LANGUAGE_CODE)
        return response

    def is_exempt(self, path):
        if path.startswith((settings.STATIC_URL, settings.MEDIA_URL)):
            return True
        if path.startswith(self.EXEMPT_PREFIXES):
            return True
        # Files such as /manifest.json
        last_segment = path.rsplit('/', 1)[-1]
        return '.' in last_segment

    @staticmethod
    def with_query(request, path):
        query = request.META.get('QUERY_STRING', '')
        return f"{path}?{query}" if query else path
