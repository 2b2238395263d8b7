"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

SUI_COIN_TYPE = "0x2::sui::SUI"
DEVNET_RPC_URL = "https://fullnode.devnet.sui.io"
TESTNET_RPC_URL = "https://fullnode.testnet.sui.io"

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NetworkConfig:
    name: str = ""
    rpc_url: str = ""


def _default_networks() -> dict[str, NetworkConfig]:
    return {
        "devnet": NetworkConfig(name="devnet", rpc_url=DEVNET_RPC_URL),
        "testnet": NetworkConfig(name="testnet", rpc_url=TESTNET_RPC_URL),
    }


@dataclass(frozen=True)
class SdkConfig:
    coin_type: str = SUI_COIN_TYPE
    default_network: str = "devnet"
    networks: dict[str, NetworkConfig] = field(default_factory=_default_networks)

    def rpc_url(self, network: str | None = None) -> str:
        """Endpoint URL for ``network``, or for the default network."""
        name = network or self.default_network
        if name not in self.networks:
            raise KeyError(f"Unknown network '{name}'")
        return self.networks[name].rpc_url


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_networks(raw: dict[str, Any] | None) -> dict[str, NetworkConfig]:
    if not raw:
        return _default_networks()
    networks: dict[str, NetworkConfig] = {}
    for name, cfg in raw.items():
        rpc_url = (cfg or {}).get("rpc_url", "")
        networks[name] = NetworkConfig(name=name, rpc_url=rpc_url)
    return networks


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> SdkConfig:
    """Load and validate SDK configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (one level up from this package).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = SdkConfig(
        coin_type=raw.get("coin_type", SUI_COIN_TYPE),
        default_network=raw.get("default_network", "devnet"),
        networks=_build_networks(raw.get("networks")),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: SdkConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.coin_type:
        raise ValueError("coin_type must not be empty")

    for name, network in cfg.networks.items():
        if not network.rpc_url.startswith(("http://", "https://")):
            raise ValueError(
                f"Network '{name}' has an invalid rpc_url '{network.rpc_url}'"
            )

    if cfg.default_network not in cfg.networks:
        raise ValueError(
            f"default_network '{cfg.default_network}' is not a configured network"
        )
