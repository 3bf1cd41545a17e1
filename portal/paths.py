"""
Locale-prefixed path rewriting
==============================

Every page URL carries exactly one locale prefix: /{locale}/rest-of-path.

Two rewrites are needed by navigation:
- Swap: a page already under /{current}/ is re-targeted to /{target}/
  (language switcher links). Only the leading segment changes.
- Prepend: a route without the current prefix gets /{target} in front
  (redirects from '/' or from locale-less links).

These are plain string transforms; they never consult the request.
"""

from .languages import split_locale


def _normalize(path):
    # Empty or relative input is treated as application-relative
    if not path:
        return '/'
    if not path.startswith('/'):
        return '/' + path
    return path


def localize(path: str, current_locale: str, target_locale: str) -> str:
    """
    Rewrite a path so it is prefixed with target_locale.

    Args:
        path: Application-relative path, may include a query string
        current_locale: Locale the path is currently under
        target_locale: Locale the result must be under

    Returns:
        '/{target}/...' with the remainder of the input preserved verbatim.
        Later occurrences of the locale code in the path are left alone.
    """
    path = _normalize(path)
    current_prefix = f'/{current_locale}/'
    if path.startswith(current_prefix):
        return f'/{target_locale}/' + path[len(current_prefix):]
    return f'/{target_locale}{path}'


def strip_locale(path: str) -> str:
    """Remove a leading supported locale segment, if any."""
    locale, remainder = split_locale(_normalize(path))
    return remainder if locale else _normalize(path)


def localized_path(path: str, locale: str) -> str:
    """
    Prefix a path with locale, replacing whichever supported locale it had.

    Used where the path's current locale is unknown (template links,
    denied-access redirects). '/' maps to '/{locale}/'.
    """
    return f'/{locale}{strip_locale(path)}'
