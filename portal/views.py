"""
View functions for the Picnic localized portal
===============================================

HTTP request handlers for:
- Root and locale-home redirects to the vote portal
- Language switching (keeps the current page, swaps its locale)
- Vote podium (top vote getters arranged [2nd, 1st, 3rd])
- Guarded portal entry points (media, shop, mypage)
- Sign-in landing for denied viewers and the OAuth callback
- Podium API endpoint (JSON)

Page views receive the URL locale as 'lang'; the locale middleware has
already guaranteed it is a supported code.
"""

from django.shortcuts import redirect
from django.views.decorators.http import require_http_methods
from django.views.decorators.csrf import csrf_exempt
from django.http import JsonResponse
from django.conf import settings
from django.utils.module_loading import import_string
from asgiref.sync import sync_to_async
import json
import logging

from .capabilities import PortalCapability
from .forms import LanguageSwitchForm, NextPathForm, PodiumRequestForm
from .guards import portal_required
from .languages import resolve
from .paths import localize, localized_path
from .ranking import VoteItem, podium

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
def root_redirect(request):
    """Send '/' to the vote portal under the viewer's preferred locale."""
    locale = resolve(getattr(request, 'LANGUAGE_CODE', None))
    return redirect(localize('/vote/', locale, locale))


@require_http_methods(["GET"])
def locale_home(request, lang):
    """Each locale's home page is its vote portal."""
    return redirect(localize('/vote/', lang, lang))


@require_http_methods(["GET", "POST"])
def switch_language(request):
    """
    Switch the active language.

    Parameters (GET query or POST form):
        language: target locale code
        next: page to return to (defaults to '/')

    Whatever supported locale prefix 'next' has (none, or a bare
    '/en') is replaced by the target, leaving exactly one prefix. The choice is remembered in the
    language cookie.

    Returns:
        Redirect to the localized 'next', or 400 JSON on invalid input
    """
    data = request.POST if request.method == 'POST' else request.GET
    form = LanguageSwitchForm(data)

    if not form.is_valid():
        logger.warning(f"Invalid language switch: {form.errors.as_json()}")
        return JsonResponse({'error': form.errors.get_json_data()}, status=400)

    target = form.cleaned_data['language']
    next_path = localized_path(form.cleaned_data['next'], target)

    response = redirect(next_path)
    response.set_cookie(
        settings.LANGUAGE_COOKIE_NAME,
        target,
        max_age=settings.LANGUAGE_COOKIE_AGE,
        secure=not settings.DEBUG,
        samesite='Lax',
    )
    logger.info(f"Language switched to {target}: {next_path}")
    return response


async def load_vote_items():
    """
    Fetch vote items from settings.PORTAL_VOTE_ITEM_SOURCE.

    The source is a callable returning item payloads ({id, vote_total});
    an empty setting means there is nothing to rank.
    """
    source_path = settings.PORTAL_VOTE_ITEM_SOURCE
    if not source_path:
        return []

    source = import_string(source_path)
    payloads = await sync_to_async(lambda: list(source()))()
    return [VoteItem.from_payload(payload) for payload in payloads]


@require_http_methods(["GET"])
@portal_required(PortalCapability.VOTE)
async def vote_podium(request, lang):
    """
    Vote portal podium.

    Returns:
        JSON with the podium entries in display order, each with its rank
    """
    try:
        items = await load_vote_items()
    except ValueError as e:
        logger.error(f"Vote item source returned invalid data: {str(e)}")
        return JsonResponse({'error': 'Vote items are unavailable.'}, status=502)

    arranged = podium(items, settings.PORTAL_PODIUM_SIZE)

    return JsonResponse({
        'locale': lang,
        'portal': PortalCapability.VOTE.value,
        'podium': [entry.as_dict() for entry in arranged],
        'switch_links': {
            code: localize(request.path, lang, code)
            for code, _ in settings.LANGUAGES
        },
    })


def portal_landing(capability):
    """Build the landing view of a guarded portal."""

    @require_http_methods(["GET"])
    @portal_required(capability)
    async def view(request, lang):
        return JsonResponse({
            'locale': lang,
            'portal': capability.value,
            'home': localized_path(f'/{capability.value}/', lang),
        })

    view.__name__ = f'{capability.value}_landing'
    return view


media_landing = portal_landing(PortalCapability.MEDIA)
shop_landing = portal_landing(PortalCapability.SHOP)
mypage_landing = portal_landing(PortalCapability.MYPAGE)


@csrf_exempt
@require_http_methods(["POST"])
def podium_api(request):
    """
    API endpoint arranging posted vote items as a podium (JSON).

    Request body:
        {"items": [{"id": ..., "vote_total": int}, ...], "n": 3}

    Returns:
        JSON {"podium": [{"id", "vote_total", "rank"}, ...]} in display
        order, or 400 with the validation errors
    """
    try:
        payload = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({'error': 'Request body must be JSON.'}, status=400)

    if not isinstance(payload, dict):
        return JsonResponse({'error': 'Request body must be a JSON object.'}, status=400)

    form = PodiumRequestForm(payload)
    if not form.is_valid():
        return JsonResponse({'error': form.errors.get_json_data()}, status=400)

    arranged = podium(form.cleaned_data['items'], form.cleaned_data['n'])
    return JsonResponse({
        'podium': [entry.as_dict() for entry in arranged],
    })


def next_path_from(request):
    """Validated 'next' query parameter, '/' when missing or unsafe."""
    form = NextPathForm(request.GET)
    if not form.is_valid():
        logger.warning(f"Rejected redirect target: {request.GET.get('next', '')!r}")
        return '/'
    return form.cleaned_data['next']


@require_http_methods(["GET"])
def sign_in(request, lang):
    """
    Sign-in landing that denied portal viewers are redirected to.

    The sign-in itself is handled by the app shell; this reports where to
    return afterwards, localized to the current locale.

    Returns:
        JSON with the locale, the auth portal and the localized 'next'
    """
    return JsonResponse({
        'locale': lang,
        'portal': PortalCapability.AUTH.value,
        'sign_in_required': True,
        'next': localized_path(next_path_from(request), lang),
    })


@require_http_methods(["GET"])
def auth_callback(request, provider=None):
    """
    OAuth provider callback (registered without a locale prefix).

    The code exchange belongs to the auth backend; the viewer is sent on to
    'next' under their preferred locale.
    """
    locale = resolve(getattr(request, 'LANGUAGE_CODE', None))
    target = localized_path(next_path_from(request), locale)
    logger.info(f"Auth callback from {provider or 'default'} provider -> {target}")
    return redirect(target)
