"""
Portal capabilities
===================

Each portal is a named area of the site (vote, media, shop, ...) whose
views are gated by a PortalGuard for that capability.
"""

from django.db import models # pyright: ignore[reportMissingModuleSource]
from django.utils.translation import gettext_lazy as _ # pyright: ignore[reportMissingModuleSource]

from .languages import split_locale


class PortalCapability(models.TextChoices):
    PUBLIC = 'public', _('Public')
    VOTE = 'vote', _('Vote')
    PIC = 'pic', _('Pic')
    COMMUNITY = 'community', _('Community')
    NOVEL = 'novel', _('Novel')
    MYPAGE = 'mypage', _('My page')
    MEDIA = 'media', _('Media')
    SHOP = 'shop', _('Shop')
    AUTH = 'auth', _('Sign in')


def capability_for_path(path):
    """
    Return the portal a path belongs to.

    The first segment after the locale prefix names the portal:
    '/en/vote/12' -> VOTE. Unknown or empty segments map to PUBLIC.
    """
    _locale, remainder = split_locale(path or '/')
    segment = remainder.lstrip('/').split('/', 1)[0].split('?', 1)[0]
    try:
        return PortalCapability(segment)
    except ValueError:
        return PortalCapability.PUBLIC
