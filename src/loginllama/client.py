"""LoginLlama — the client that checks login attempts."""

from __future__ import annotations

import logging
import os
import warnings
from collections.abc import Callable, Mapping
from contextvars import Token
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from loginllama.context import ContextStore, RequestContext, default_store
from loginllama.exceptions import ValidationError
from loginllama.ip import resolve_ip
from loginllama.normalize import normalize_response
from loginllama.result import AuthenticationOutcome, CheckResult
from loginllama.schema import CheckOptions, LoginCheckPayload
from loginllama.transport import HttpxTransport, Transport
from loginllama.views import HeadersView, RequestView, ambient_view, as_view

logger = logging.getLogger(__name__)

API_KEY_ENV = "LOGINLLAMA_API_KEY"
LOGIN_CHECK_PATH = "/login/check"

_CAMEL_TO_SNAKE = {
    "ipAddress": "ip_address",
    "userAgent": "user_agent",
    "emailAddress": "email_address",
    "geoCountry": "geo_country",
    "geoCity": "geo_city",
    "userTimeOfDay": "user_time_of_day",
    "authenticationOutcome": "authentication_outcome",
}
_SNAKE_TO_CAMEL = {snake: camel for camel, snake in _CAMEL_TO_SNAKE.items()}


def _build_options(
    options: CheckOptions | Mapping[str, Any] | None,
    overrides: dict[str, Any],
) -> CheckOptions:
    """Merge *overrides* over *options*; an override replaces both key spellings."""
    if isinstance(options, CheckOptions):
        data = {name: getattr(options, name) for name in CheckOptions.model_fields}
    else:
        data = dict(options or {})

    for key, value in overrides.items():
        field = _CAMEL_TO_SNAKE.get(key, key)
        data.pop(_SNAKE_TO_CAMEL.get(field, field), None)
        data[field] = value

    try:
        return CheckOptions.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else "options"
        raise ValidationError(field, f"{field}: {first['msg']}") from e


class LoginLlama:
    """Client for detecting suspicious login attempts.

    IP address and User-Agent are detected automatically when not passed,
    from (first hit wins, independently for each value):

    1. Explicit ``ip_address`` / ``user_agent`` options
    2. The ``request`` option (framework request, mapping or view)
    3. The context stored by :meth:`middleware` for the current request
    4. The ambient view (CGI variables in ``os.environ`` by default)

    Parameters:
        api_key: API key.  Falls back to the ``LOGINLLAMA_API_KEY`` env var.
        transport: Custom :class:`Transport`.  Defaults to
            :class:`HttpxTransport` against the public API.
        context_store: Store read during step 3.  Defaults to the
            package-wide store that :func:`loginllama.set_context` writes.
        ambient: Zero-argument callable returning the step 4 view.
        timeout: Request timeout for the default transport, in seconds.

    Example:
        >>> loginllama = LoginLlama("sk_live_xxx")
        >>> result = await loginllama.check("user@example.com", request=request)
        >>> if not result.ok:
        ...     print(result.codes)
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        transport: Transport | None = None,
        context_store: ContextStore | None = None,
        ambient: Callable[[], RequestView | None] = ambient_view,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key or os.getenv(API_KEY_ENV, "")
        self._transport = transport or HttpxTransport(self._api_key, timeout=timeout)
        self._context_store = context_store or default_store
        self._ambient = ambient

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def context_store(self) -> ContextStore:
        return self._context_store

    # ── checks ───────────────────────────────────────────────

    async def check(
        self,
        identity_key: str,
        options: CheckOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> CheckResult | Any:
        """Check a login attempt for suspicious activity.

        Args:
            identity_key: User identifier (email, username, user ID, ...).
            options: :class:`CheckOptions` or a mapping with camelCase or
                snake_case keys.
            **overrides: Same keys as *options*; they take precedence.

        Returns:
            A :class:`CheckResult` for JSON:API replies, or the reply itself
            for the legacy flat format.

        Raises:
            ValidationError: If ``identity_key`` is empty or IP/User-Agent
                cannot be detected.  Raised before any request is sent.
            TransportError: If the API is unreachable or answers HTTP >= 400.
        """
        if not identity_key:
            raise ValidationError("identity_key", "identity_key is required")

        opts = _build_options(options, overrides)
        ip_address, user_agent = self._resolve_client(opts)

        if not ip_address:
            raise ValidationError(
                "ip_address",
                "ip_address could not be detected. Pass 'ip_address' or 'request' in options.",
            )
        if not user_agent:
            raise ValidationError(
                "user_agent",
                "user_agent could not be detected. Pass 'user_agent' or 'request' in options.",
            )

        payload = LoginCheckPayload(
            ip_address=ip_address,
            user_agent=user_agent,
            identity_key=identity_key,
            email_address=opts.email_address,
            geo_country=opts.geo_country,
            geo_city=opts.geo_city,
            user_time_of_day=opts.user_time_of_day,
            authentication_outcome=opts.authentication_outcome,
        )
        raw = await self._transport.post(LOGIN_CHECK_PATH, payload.model_dump(mode="json"))
        return normalize_response(raw)

    async def report_success(
        self,
        identity_key: str,
        options: CheckOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> CheckResult | Any:
        """Report a successful authentication.

        Use after the user has authenticated with your system.  Equivalent
        to ``check(identity_key, authentication_outcome="success", ...)``.
        """
        overrides.pop("authenticationOutcome", None)
        overrides["authentication_outcome"] = AuthenticationOutcome.SUCCESS
        return await self.check(identity_key, options, **overrides)

    async def report_failure(
        self,
        identity_key: str,
        options: CheckOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> CheckResult | Any:
        """Report a failed authentication attempt (wrong password, MFA failed, ...).

        Helps the service detect brute force and credential stuffing.
        """
        overrides.pop("authenticationOutcome", None)
        overrides["authentication_outcome"] = AuthenticationOutcome.FAILED
        return await self.check(identity_key, options, **overrides)

    async def check_login(self, params: Mapping[str, Any]) -> CheckResult | Any:
        """Deprecated flat-params entry point.  Use :meth:`check` instead.

        *params* carries ``identity_key`` next to the check options, e.g.
        ``{"identity_key": ..., "ip_address": ..., "user_agent": ...}``.
        """
        warnings.warn(
            "check_login() is deprecated, use check() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        options = dict(params)
        identity_key = options.pop("identity_key", None) or options.pop("identityKey", None)
        return await self.check(identity_key or "", options)

    # ── context ──────────────────────────────────────────────

    def middleware(self) -> Callable[..., Token[RequestContext | None]]:
        """Return a hook that records the current request for later checks.

        Call it once per inbound request, before any ``check``.  Without an
        argument the ambient view is used.

        Example:
            >>> hook = loginllama.middleware()
            >>> hook(request)
            >>> await loginllama.check(email)  # IP / UA auto-detected
        """
        store = self._context_store
        ambient = self._ambient

        def hook(request: Any = None) -> Token[RequestContext | None]:
            if request is None:
                # An absent ambient view records an empty context.
                request = ambient() or HeadersView({})
            return store.set(request)

        return hook

    # ── resolution ───────────────────────────────────────────

    def _resolve_client(self, opts: CheckOptions) -> tuple[str | None, str | None]:
        ip_address = opts.ip_address or None
        user_agent = opts.user_agent or None

        if opts.request is not None and not (ip_address and user_agent):
            view = as_view(opts.request)
            if view is not None:
                ip_address = ip_address or resolve_ip(view)
                user_agent = user_agent or view.user_agent() or None
                logger.debug("Read client details from request (framework=%s)", view.framework)

        if not (ip_address and user_agent):
            context = self._context_store.get()
            if context is not None:
                ip_address = ip_address or context.ip_address
                user_agent = user_agent or context.user_agent
                logger.debug("Read client details from stored context")

        if not (ip_address and user_agent):
            view = self._ambient()
            if view is not None:
                ip_address = ip_address or resolve_ip(view)
                user_agent = user_agent or view.user_agent() or None
                logger.debug("Read client details from ambient view")

        return ip_address, user_agent
