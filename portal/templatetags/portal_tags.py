"""
Django template tags and filters for the Picnic localized portal

Custom filters/tags for:
- Localizing link targets
- Language switcher links for the current page
- Podium arrangement of ranked vote items
"""

from django import template

from portal.languages import resolve
from portal.paths import localize, localized_path
from portal.ranking import VoteItem, podium as arrange

register = template.Library()


@register.filter
def localized(path, locale):
    """
    Prefix a path with a locale, replacing any locale it already has.
    Usage: {{ "/vote/"|localized:CURRENT_LOCALE }}
    """
    return localized_path(str(path), resolve(locale))


@register.simple_tag
def switch_locale_url(path, current_locale, target_locale):
    """
    Same page under another locale.
    Usage: {% switch_locale_url request.get_full_path CURRENT_LOCALE 'en' %}
    """
    return localize(str(path), current_locale, resolve(target_locale))


@register.filter
def podium(items, n=3):
    """
    Arrange vote items as a podium ([2nd, 1st, 3rd]).
    Usage: {% for entry in vote_items|podium %}{{ entry.rank }}{% endfor %}

    Accepts VoteItems or {id, vote_total} mappings.
    """
    vote_items = [
        item if isinstance(item, VoteItem) else VoteItem.from_payload(item)
        for item in items or []
    ]
    return arrange(vote_items, int(n))
