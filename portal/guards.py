"""
Portal access guards
====================

Gates portal-scoped views behind an authorization check:
- The allow/deny decision is delegated to an injected authorizer
  callable (capability, viewer) -> bool, sync or async
- Each check moves UNEVALUATED -> CHECKING -> ALLOWED | DENIED
- Fail-closed: authorizer errors, timeouts and any result other than
  True all resolve to DENIED
- A denied viewer never reaches the wrapped view; they get a redirect
  to the localized sign-in page or a plain 403

If the request is cancelled while CHECKING, the cancellation propagates
and no response or redirect is produced.
"""

from dataclasses import dataclass, field
from functools import wraps
from typing import Optional
import asyncio
import inspect
import logging
import urllib.parse

from asgiref.sync import sync_to_async # pyright: ignore[reportMissingModuleSource]
from django.conf import settings # pyright: ignore[reportMissingModuleSource]
from django.db import models # pyright: ignore[reportMissingModuleSource]
from django.http import HttpResponseForbidden, HttpResponseRedirect # pyright: ignore[reportMissingModuleSource]
from django.utils.module_loading import import_string # pyright: ignore[reportMissingModuleSource]

from .capabilities import PortalCapability
from .languages import resolve
from .paths import localized_path

logger = logging.getLogger(__name__)


class GuardState(models.TextChoices):
    UNEVALUATED = 'unevaluated'
    CHECKING = 'checking'
    ALLOWED = 'allowed'
    DENIED = 'denied'


@dataclass
class GuardEvaluation:
    """State of a single authorization check. Not shared between requests."""

    capability: PortalCapability
    state: GuardState = GuardState.UNEVALUATED
    reason: Optional[str] = field(default=None)

    @property
    def allowed(self):
        return self.state == GuardState.ALLOWED

    def _resolve(self, allowed, reason=None):
        self.state = GuardState.ALLOWED if allowed else GuardState.DENIED
        self.reason = reason


def get_authorizer(authorizer=None):
    """
    Return the authorizer as a coroutine function.

    Args:
        authorizer: callable or dotted path; defaults to settings.PORTAL_AUTHORIZER
    """
    authorizer = authorizer or settings.PORTAL_AUTHORIZER
    if isinstance(authorizer, str):
        authorizer = import_string(authorizer)
    if inspect.iscoroutinefunction(authorizer):
        return authorizer
    # A hung sync check must not occupy the thread-sensitive executor
    return sync_to_async(authorizer, thread_sensitive=False)


class PortalGuard:
    """
    Access guard for one portal capability.

    The capability is fixed when the guard is created. Authorizer and
    timeout default to settings.PORTAL_AUTHORIZER and
    settings.PORTAL_AUTH_TIMEOUT, read at check time.
    """

    def __init__(self, capability, authorizer=None, timeout=None):
        self._capability = PortalCapability(capability)
        self._authorizer = authorizer
        self._timeout = timeout

    @property
    def capability(self):
        return self._capability

    @property
    def timeout(self):
        return self._timeout if self._timeout is not None else settings.PORTAL_AUTH_TIMEOUT

    async def evaluate(self, viewer=None, load_viewer=None) -> GuardEvaluation:
        """
        Run the authorization check for viewer.

        Args:
            viewer: the viewer, when already known
            load_viewer: coroutine function returning the viewer (e.g.
                request.auser); the lookup counts against the timeout and
                its errors deny like authorizer errors

        Returns:
            GuardEvaluation in state ALLOWED or DENIED

        Raises:
            asyncio.CancelledError: the surrounding request was aborted
        """
        evaluation = GuardEvaluation(capability=self._capability)
        evaluation.state = GuardState.CHECKING

        async def check():
            authorize = get_authorizer(self._authorizer)
            current_viewer = await load_viewer() if load_viewer is not None else viewer
            return await authorize(self._capability, current_viewer)

        try:
            result = await asyncio.wait_for(check(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Authorization for '{self._capability}' timed out "
                           f"after {self.timeout}s, denying")
            evaluation._resolve(False, 'timeout')
            return evaluation
        except asyncio.CancelledError:
            logger.debug(f"Authorization for '{self._capability}' cancelled")
            raise
        except Exception as e:
            logger.error(f"Authorization for '{self._capability}' failed: {str(e)}")
            evaluation._resolve(False, 'error')
            return evaluation

        if result is True:
            evaluation._resolve(True)
        else:
            logger.info(f"Authorization for '{self._capability}' denied")
            evaluation._resolve(False, 'denied')
        return evaluation

    def denied_response(self, request):
        """
        Deterministic fallback for denied viewers.

        Redirects to settings.PORTAL_DENIED_URL under the request's locale,
        carrying the requested path as 'next'. Plain 403 when unset.
        """
        denied_url = settings.PORTAL_DENIED_URL
        if not denied_url:
            return HttpResponseForbidden()

        locale = resolve(getattr(request, 'LANGUAGE_CODE', None))
        query = urllib.parse.urlencode({'next': request.get_full_path()})
        return HttpResponseRedirect(f"{localized_path(denied_url, locale)}?{query}")


def portal_required(capability, authorizer=None, timeout=None):
    """
    Decorator guarding an async view with a PortalGuard.

    Usage:
        @portal_required(PortalCapability.MYPAGE)
        async def mypage(request, lang): ...
    """
    guard = PortalGuard(capability, authorizer=authorizer, timeout=timeout)

    def decorator(view_func):
        @wraps(view_func)
        async def _wrapped_view(request, *args, **kwargs):
            evaluation = await guard.evaluate(load_viewer=getattr(request, 'auser', None))
            request.portal_evaluation = evaluation
            if not evaluation.allowed:
                return guard.denied_response(request)
            return await view_func(request, *args, **kwargs)

        _wrapped_view.portal_guard = guard
        return _wrapped_view

    return decorator
