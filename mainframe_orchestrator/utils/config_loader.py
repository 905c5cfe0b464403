"""
Orchestrator configuration loader (upstream endpoints, sentinels, claim limits).
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

_DEFAULT_GATEWAY_URL = "http://cap-sg-prd-2.integration.ibmcloud.com:16476"


class UpstreamConfig(BaseModel):
    base_url: str
    # None means wait for the upstream indefinitely
    timeout_seconds: Optional[float] = Field(default=None, gt=0)


class OrderLogConfig(UpstreamConfig):
    enabled: bool = True


class UpstreamsConfig(BaseModel):
    phonebook: UpstreamConfig = Field(default_factory=lambda: UpstreamConfig(base_url=_DEFAULT_GATEWAY_URL))
    postal_codes: UpstreamConfig = Field(default_factory=lambda: UpstreamConfig(base_url="http://api.zippopotam.us"))
    catalog: UpstreamConfig = Field(default_factory=lambda: UpstreamConfig(base_url=_DEFAULT_GATEWAY_URL))
    order_log: OrderLogConfig = Field(default_factory=lambda: OrderLogConfig(base_url=_DEFAULT_GATEWAY_URL))


class ContactLookupConfig(BaseModel):
    not_found_message: str = "SPECIFIED PERSON WAS NOT FOUND"
    country_code: str = "us"


class MobileOrderConfig(BaseModel):
    success_message: str = "ORDER SUCCESSFULLY PLACED"


class ClaimRulesConfig(BaseModel):
    """Claim type -> amount above which the claim is rejected."""

    limits: Dict[str, Decimal] = Field(
        default_factory=lambda: {
            "MEDICAL": Decimal("100"),
            "DENTAL": Decimal("800"),
            "DRUG": Decimal("1000"),
        }
    )


class ServerConfig(BaseModel):
    name: str = "Mainframe Orchestrator API"
    port: int = Field(default=50001, ge=1, le=65535)


class OrchestratorConfig(BaseModel):
    integrations_mode: Literal["real", "mock"] = "real"
    server: ServerConfig = Field(default_factory=ServerConfig)
    upstreams: UpstreamsConfig = Field(default_factory=UpstreamsConfig)
    contact_lookup: ContactLookupConfig = Field(default_factory=ContactLookupConfig)
    mobile_order: MobileOrderConfig = Field(default_factory=MobileOrderConfig)
    claim_rules: ClaimRulesConfig = Field(default_factory=ClaimRulesConfig)


_ENV_URL_OVERRIDES = {
    "PHONEBOOK_API_URL": "phonebook",
    "POSTAL_CODE_API_URL": "postal_codes",
    "CATALOG_API_URL": "catalog",
    "ORDER_LOG_API_URL": "order_log",
}

_ENV_CLAIM_LIMITS = {
    "CLAIM_LIMIT_MEDICAL": "MEDICAL",
    "CLAIM_LIMIT_DENTAL": "DENTAL",
    "CLAIM_LIMIT_DRUG": "DRUG",
}


def load_orchestrator_config(config_path: Optional[Path] = None) -> OrchestratorConfig:
    """
    Load and validate orchestrator configuration.

    Args:
        config_path: Path to config file. Defaults to ORCHESTRATOR_CONFIG or
            config/orchestrator.yml. A missing file means built-in defaults.

    Returns:
        Validated OrchestratorConfig with environment overrides applied

    Raises:
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        env_path = os.getenv("ORCHESTRATOR_CONFIG")
        config_path = Path(env_path) if env_path else Path(__file__).parent.parent.parent / "config" / "orchestrator.yml"

    data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("Config file %s not found; using defaults", config_path)

    _apply_env_overrides(data)

    try:
        config = OrchestratorConfig(**data)
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
    logger.info("Loaded orchestrator config (integrations_mode=%s)", config.integrations_mode)
    return config


def _apply_env_overrides(data: Dict[str, Any]) -> None:
    upstreams = data.get("upstreams") or {}
    data["upstreams"] = upstreams
    for env_name, key in _ENV_URL_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            upstreams.setdefault(key, {})["base_url"] = value

    timeout = os.getenv("UPSTREAM_TIMEOUT_SECONDS")
    if timeout:
        for key in _ENV_URL_OVERRIDES.values():
            upstreams.setdefault(key, {})["timeout_seconds"] = timeout

    # Partial sections only carry the overridden field; fill base_url from defaults
    defaults = UpstreamsConfig()
    for key, section in upstreams.items():
        default = getattr(defaults, key, None)
        if isinstance(section, dict) and "base_url" not in section and default is not None:
            section["base_url"] = default.base_url

    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        data["integrations_mode"] = "real"
    elif mode in {"mock", "test"}:
        data["integrations_mode"] = "mock"

    claim_rules = data.get("claim_rules") or {}
    data["claim_rules"] = claim_rules
    # YAML and env values are merged over the default table
    limits: Dict[str, Any] = dict(ClaimRulesConfig().limits)
    limits.update(claim_rules.get("limits") or {})
    claim_rules["limits"] = limits
    for env_name, claim_type in _ENV_CLAIM_LIMITS.items():
        value = os.getenv(env_name)
        if value:
            limits[claim_type] = value
