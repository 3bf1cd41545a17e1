"""
Default portal authorizer
=========================

Session-based allow/deny decision used when no other authorizer is
configured via settings.PORTAL_AUTHORIZER:
- Capabilities in settings.PORTAL_PUBLIC_CAPABILITIES are open to anyone
- Every other portal requires an authenticated, active user

Any callable with the same signature, sync or async, can replace it.
"""

import logging

from django.conf import settings # pyright: ignore[reportMissingModuleSource]

logger = logging.getLogger(__name__)


async def session_authorizer(capability, viewer):
    """
    Decide whether viewer may enter the portal for capability.

    Args:
        capability: PortalCapability being guarded
        viewer: request user (AnonymousUser when signed out), or None

    Returns:
        True to allow, False to deny
    """
    if capability in settings.PORTAL_PUBLIC_CAPABILITIES:
        return True

    if viewer is None or not viewer.is_authenticated:
        logger.info(f"Anonymous viewer denied '{capability}' portal")
        return False

    return bool(viewer.is_active)
