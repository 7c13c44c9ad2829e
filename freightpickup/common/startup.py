"""Startup-time logging of the carrier setup a process will use."""

import os

from freightpickup.common.config import CarrierConfig
from freightpickup.common.logging import logger


def _safe_env(name: str) -> str:
    """Return env value with simple redaction for secret-like variable names."""

    value = os.getenv(name)
    if value is None:
        return "<unset>"
    if any(secret in name for secret in ["KEY", "SECRET", "PASSWORD", "TOKEN", "USERNAME"]):
        return "<redacted>"
    return value


def carrier_summary(carrier: CarrierConfig) -> dict[str, object]:
    """Describe endpoint and credential presence without exposing credential values."""

    credentials = carrier.credentials
    return {
        "environment": "production" if carrier.is_production else "test",
        "endpoint_url": carrier.endpoint_url,
        "timeout_seconds": carrier.timeout_seconds,
        "username_set": bool(credentials.username),
        "password_set": bool(credentials.password.get_secret_value()),
        "access_key_set": bool(credentials.access_key.get_secret_value()),
    }


def log_startup_config(service_name: str, carrier: CarrierConfig, keys: list[str]) -> None:
    """Log the selected carrier endpoint plus chosen env keys for quick troubleshooting."""

    config: dict[str, object] = {"service": service_name, **carrier_summary(carrier)}
    for key in keys:
        config[key] = _safe_env(key)
    if not (config["username_set"] and config["access_key_set"]):
        logger.warning("carrier credentials incomplete; pickup requests will be rejected by the carrier")
    logger.info("startup_config=%s", config)
