"""
Django Forms for the Picnic localized portal
=============================================

Handles validation for:
- Switching the active language (language switcher links/forms)
- Podium API requests (vote items posted as JSON)

Security features:
- 'next' targets must be local paths (no open redirects)
- Vote totals must be non-negative integers
"""

from django import forms # pyright: ignore[reportMissingModuleSource]
from django.conf import settings # pyright: ignore[reportMissingModuleSource]
from django.core.exceptions import ValidationError # pyright: ignore[reportMissingModuleSource]
from django.utils.http import url_has_allowed_host_and_scheme # pyright: ignore[reportMissingModuleSource]
from django.utils.translation import gettext_lazy as _ # pyright: ignore[reportMissingModuleSource]

from .ranking import VoteItem

MAX_PODIUM_SIZE = 50


class NextPathForm(forms.Form):
    """
    Validates an optional 'next' return target.

    Validates:
    - next: optional local path to return to, defaults to '/'
    """

    next = forms.CharField(required=False, max_length=2000)

    def clean_next(self):
        """Only allow same-site relative paths."""
        target = self.cleaned_data.get('next', '').strip()

        if not target:
            return '/'

        if not target.startswith('/') or not url_has_allowed_host_and_scheme(
            target, allowed_hosts=None
        ):
            raise ValidationError('Redirect target must be a local path.')

        return target


class LanguageSwitchForm(NextPathForm):
    """
    Form for switching the active language.

    Validates:
    - language: one of settings.LANGUAGES (exact code)
    - next: see NextPathForm
    """

    language = forms.ChoiceField(label=_('Language'))

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['language'].choices = settings.LANGUAGES


class PodiumRequestForm(forms.Form):
    """
    Validates a podium request body: {"items": [...], "n": 3}.

    Each item needs an 'id' and a non-negative integer 'vote_total'
    (or 'voteTotal').
    """

    items = forms.JSONField(required=False)
    n = forms.IntegerField(required=False, min_value=0, max_value=MAX_PODIUM_SIZE)

    def clean_items(self):
        """Convert item payloads to VoteItems, preserving order."""
        items = self.cleaned_data.get('items')

        if items is None:
            return []

        if not isinstance(items, list):
            raise ValidationError('Items must be a list.')

        try:
            return [VoteItem.from_payload(item) for item in items]
        except ValueError as e:
            raise ValidationError(str(e))

    def clean_n(self):
        n = self.cleaned_data.get('n')
        return settings.PORTAL_PODIUM_SIZE if n is None else n
