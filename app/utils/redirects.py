import logging
from typing import NamedTuple, Optional
from urllib.parse import urljoin, urlparse

from flask import redirect, request, session, url_for

from .enums import UserRoles

logger = logging.getLogger(__name__)

INTENDED_URL_KEY = "url.intended"
DEFAULT_ENDPOINT = "admin.dashboard"

# Checked top to bottom; the first role the principal holds wins.
ROLE_REDIRECTS = [
    (UserRoles.SUPER_ADMIN, "admin.dashboard"),
    (UserRoles.CHURCH_ADMIN, "admin.church.dashboard"),
]


class RouteTarget(NamedTuple):
    endpoint: Optional[str] = None
    url: Optional[str] = None

    @property
    def location(self):
        return self.url or self.endpoint


def resolve_login_redirect(principal_roles, intended_url=None):
    """Pick where a freshly authenticated principal should land.

    A non-empty intended URL always wins. Otherwise the first entry of
    ROLE_REDIRECTS whose role the principal holds decides, falling back to
    DEFAULT_ENDPOINT. Role names that are not UserRoles values never match.
    """
    if intended_url:
        return RouteTarget(url=intended_url)

    held = set()
    for name in principal_roles:
        role = UserRoles.lookup(name)
        if role is None:
            logger.warning("Ignoring unknown role %r during login redirect", name)
            continue
        held.add(role)

    for role, endpoint in ROLE_REDIRECTS:
        if role in held:
            return RouteTarget(endpoint=endpoint)

    return RouteTarget(endpoint=DEFAULT_ENDPOINT)


def is_safe_redirect_url(target):
    """True when `target` stays on this host over http(s)."""
    if not target:
        return False
    host_url = urlparse(request.host_url)
    redirect_url = urlparse(urljoin(request.host_url, target))
    return (
        redirect_url.scheme in ("http", "https")
        and host_url.netloc == redirect_url.netloc
    )


def remember_intended_url(target):
    """Store a same-host URL to restore once the user has logged in."""
    if is_safe_redirect_url(target):
        session[INTENDED_URL_KEY] = target
        return True
    if target:
        logger.info("Discarding off-site intended URL %r", target)
    return False


def login_redirect(user):
    """Redirect response for `user` right after authentication."""
    target = resolve_login_redirect(user.roles, session.pop(INTENDED_URL_KEY, None))
    if target.url:
        return redirect(target.url)
    return redirect(url_for(target.endpoint))
