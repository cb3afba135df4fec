from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Dict

# Load .env if python-dotenv is installed (extra: asaas[dotenv])
try:
    from dotenv import load_dotenv
except ImportError:
    pass
else:
    load_dotenv()

from .debug import dprint, mask_token, set_debug
from .errors import AsaasConfigError


ENVIRONMENTS: Dict[str, str] = {
    "production": "https://api.asaas.com/v3",
    "sandbox": "https://sandbox.asaas.com/api/v3",
}

_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "live": "production",
    "sandbox": "sandbox",
    "hmlg": "sandbox",
    "test": "sandbox",
}

# API keys carry their environment in the prefix
_KEY_PREFIXES = {
    "production": "$aact_prod_",
    "sandbox": "$aact_hmlg_",
}


# ----------------------------- helpers -----------------------------

def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    v = value.strip().lower()
    return v not in ("0", "false", "no", "off", "")


def _parse_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default


def _parse_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


def _normalize_environment(value: Optional[str]) -> str:
    v = (value or "").strip().lower()
    if not v:
        return "sandbox"
    # unknown values are kept as-is and rejected by validate()
    return _ENV_ALIASES.get(v, v)


def _normalize_base_url(url: Optional[str], environment: str) -> str:
    url = (url or "").strip()
    if not url:
        return ENVIRONMENTS.get(environment, ENVIRONMENTS["sandbox"])
    return url.rstrip("/")


# (field, env var, parser, cast for explicit args, default)
_TYPED_FIELDS = (
    ("timeout", "ASAAS_TIMEOUT", _parse_float, float, 30.0),
    ("debug", "ASAAS_DEBUG", _parse_bool, bool, False),
    ("retries", "ASAAS_RETRIES", _parse_int, int, 0),
    ("backoff_factor", "ASAAS_BACKOFF", _parse_float, float, 0.5),
)


# ----------------------------- config -----------------------------

@dataclass
class AsaasConfig:
    """
    Configuration with precedence:
      explicit kwargs > environment (.env) > defaults

    Every server-side call requires `access_token`.
    """

    # Credentials
    access_token: Optional[str] = None

    # Routing / network
    environment: Optional[str] = None
    base_url: Optional[str] = None
    timeout: Optional[float] = None

    # Diagnostics
    debug: Optional[bool] = None

    # Retry hints (ASAAS_RETRIES, ASAAS_BACKOFF)
    retries: Optional[int] = None
    backoff_factor: Optional[float] = None

    # Token Asaas sends back in the `asaas-access-token` header of webhooks
    webhook_token: Optional[str] = None

    # Internal: where each field was sourced from (arg/env/default) for debugging
    _source: Dict[str, str] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        env = os.environ

        self.access_token = self._pick("access_token", self.access_token, env.get("ASAAS_ACCESS_TOKEN", ""))
        self.environment = _normalize_environment(self._pick("environment", self.environment, env.get("ASAAS_ENV")))
        self.base_url = _normalize_base_url(
            self._pick("base_url", self.base_url, env.get("ASAAS_BASE_URL")), self.environment
        )
        self.webhook_token = self._pick("webhook_token", self.webhook_token, env.get("ASAAS_WEBHOOK_TOKEN")) or None

        for name, env_key, parse, cast, default in _TYPED_FIELDS:
            value = getattr(self, name)
            if value is None:
                value = parse(env.get(env_key), default)
                self._source[name] = "env" if env_key in env else "default"
            else:
                self._source[name] = "arg"
            setattr(self, name, cast(value))

        # an explicit debug= drives the SDK-wide switch, ASAAS_DEBUG already set it
        if self._source["debug"] == "arg":
            set_debug(self.debug)
        if self.debug:
            dprint("[Config] Loaded config:", {**self.masked(), "source": self._source})

    def _pick(self, name: str, given: Optional[str], from_env: Optional[str]) -> Optional[str]:
        if given:
            self._source[name] = "arg"
            return given
        self._source[name] = "env" if from_env else "default"
        return from_env

    # -------- validation & utils --------
    def validate(self) -> "AsaasConfig":
        """Check credentials and environment before any API call."""
        if not self.access_token:
            dprint("[Config] Validation failed: access_token missing")
            raise AsaasConfigError("ASAAS_ACCESS_TOKEN is required for API calls.")

        if self.environment not in ENVIRONMENTS:
            raise AsaasConfigError(
                f"Unknown environment {self.environment!r}; expected one of {sorted(ENVIRONMENTS)}."
            )

        # A production key against the sandbox (or vice versa) is always a mistake.
        for env_name, prefix in _KEY_PREFIXES.items():
            if env_name != self.environment and self.access_token.startswith(prefix):
                raise AsaasConfigError(
                    f"access_token is a {env_name} key but environment is {self.environment!r}."
                )

        dprint("[Config] Validation OK")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def masked(self) -> dict:
        """Return a sanitized dict for logging/diagnostics."""
        return {
            "access_token": mask_token(self.access_token) if self.access_token else "(empty)",
            "environment": self.environment,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "debug": self.debug,
            "retries": self.retries,
            "backoff_factor": self.backoff_factor,
            "webhook_token": "***" if self.webhook_token else None,
        }

    def copy_with(
        self,
        *,
        access_token: Optional[str] = None,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
        retries: Optional[int] = None,
        backoff_factor: Optional[float] = None,
        webhook_token: Optional[str] = None,
    ) -> "AsaasConfig":
        """Create a modified copy (handy in tests)."""
        new_env = self.environment if environment is None else _normalize_environment(environment)
        if base_url is not None:
            new_base = base_url
        elif environment is not None and self._source.get("base_url") != "arg":
            # switching environment re-derives a base_url that was not set explicitly
            new_base = None
        else:
            new_base = self.base_url
        return replace(
            self,
            access_token=self.access_token if access_token is None else access_token,
            environment=new_env,
            base_url=new_base,
            timeout=self.timeout if timeout is None else float(timeout),
            debug=self.debug if debug is None else bool(debug),
            retries=self.retries if retries is None else int(retries),
            backoff_factor=self.backoff_factor if backoff_factor is None else float(backoff_factor),
            webhook_token=self.webhook_token if webhook_token is None else webhook_token,
        )

    # -------- alt constructors --------
    @classmethod
    def from_env(cls) -> "AsaasConfig":
        """Build config strictly from environment (.env considered if loaded)."""
        return cls().validate()


__all__ = ["AsaasConfig", "ENVIRONMENTS"]
