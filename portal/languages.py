"""
Language resolution
===================

Validates raw locale tokens (URL segments, cookies, form input) against the
configured language set:
- Supported codes come from settings.LANGUAGES, in declaration order
- The default language is settings.LANGUAGE_CODE
- Matching is exact and case-sensitive: 'KO' is not 'ko'

Resolution never fails. Anything that is not a supported code resolves to
the default language, so the UI always has a valid locale to render with.
"""

from typing import Optional, Tuple
import logging

from django.conf import settings # pyright: ignore[reportMissingModuleSource]
from django.core.exceptions import ImproperlyConfigured # pyright: ignore[reportMissingModuleSource]

logger = logging.getLogger(__name__)


# Country codes commonly typed in place of language codes
LANGUAGE_ALIASES = {
    'kr': 'ko',
    'cn': 'zh',
    'jp': 'ja',
    'in': 'id',
}


def supported_languages() -> Tuple[str, ...]:
    """Return the supported locale codes in configured order."""
    return tuple(code for code, _ in settings.LANGUAGES)


def default_language() -> str:
    return settings.LANGUAGE_CODE


def is_supported(token: Optional[str]) -> bool:
    """Exact membership test against the supported set."""
    return isinstance(token, str) and token in supported_languages()


def resolve(token: Optional[str]) -> str:
    """
    Resolve a raw locale token to a supported language.

    Args:
        token: Untrusted locale string, or None

    Returns:
        The token itself if it is a supported code, else the default language
    """
    if is_supported(token):
        return token
    return default_language()


def resolve_alias(token: Optional[str]) -> Optional[str]:
    """
    Map a mistyped country code (e.g. 'kr') to its language code.

    Returns None when the token has no alias or the alias target is not
    one of the supported languages.
    """
    if not isinstance(token, str):
        return None
    target = LANGUAGE_ALIASES.get(token)
    if target and is_supported(target):
        return target
    return None


def split_locale(path: str) -> Tuple[Optional[str], str]:
    """
    Split a path into its leading locale and the remainder.

    Args:
        path: Application-relative path, e.g. '/en/vote/12'

    Returns:
        Tuple (locale, remainder). locale is None when the first segment is
        not a supported code; remainder is then the path unchanged. A query
        string stays on the remainder.
        Example: '/en/vote/12' -> ('en', '/vote/12'), '/en?x=1' -> ('en', '/?x=1')
    """
    route, qmark, query = path.partition('?')
    segment, sep, rest = route.lstrip('/').partition('/')
    if is_supported(segment):
        return segment, ('/' + rest if sep else '/') + qmark + query
    return None, path


def validate_language_settings():
    """
    Check the language configuration once at startup.

    Raises:
        ImproperlyConfigured: empty language set, or default not in the set
    """
    codes = supported_languages()
    if not codes:
        raise ImproperlyConfigured("LANGUAGES must contain at least one language.")
    if settings.LANGUAGE_CODE not in codes:
        raise ImproperlyConfigured(
            f"LANGUAGE_CODE '{settings.LANGUAGE_CODE}' is not one of "
            f"LANGUAGES {list(codes)}."
        )
    logger.debug(f"Languages configured: {list(codes)} (default {settings.LANGUAGE_CODE})")
