"""Template context for the active locale and portal."""

from django.conf import settings

from .capabilities import capability_for_path
from .languages import resolve
from .paths import localize


def locale(request):
    """
    Expose the request locale, active portal and language switcher links.

    CURRENT_LOCALE: resolved locale of this request
    CURRENT_PORTAL: PortalCapability the requested path belongs to
    LOCALE_SWITCH_LINKS: [(code, name, href), ...] for every supported
    language, pointing at the current page
    """
    current = resolve(getattr(request, 'LANGUAGE_CODE', None))
    path = request.get_full_path()
    return {
        'CURRENT_LOCALE': current,
        'CURRENT_PORTAL': capability_for_path(request.path),
        'LOCALE_SWITCH_LINKS': [
            (code, name, localize(path, current, code))
            for code, name in settings.LANGUAGES
        ],
    }
