"""Configuration — frozen dataclasses loaded from YAML, env vars and CLI args."""

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Optional

import yaml

from service_logging.severity import Severity

logger = logging.getLogger(__name__)

SINKS = ("console", "coralogix")


@dataclass(frozen=True)
class CoralogixConfig:
    # API key provided by Coralogix, sent as privateKey
    api_key: str = ""
    # Included as a dimension on every batch
    application_name: str = ""
    endpoint: str = "https://api.coralogix.com/api/v1/logs"
    # Seconds; applies to connect, read and write of the single request
    timeout: float = 5.0


@dataclass(frozen=True)
class ClientConfig:
    sink: str = "console"
    subsystem: str = "http"
    config_file: Optional[str] = None
    min_severity: Severity = Severity.DEBUG


def load_yaml_config(path: Optional[str]) -> dict:
    """Load a YAML mapping from *path*. Returns an empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML config from %s", path)
        return data
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}


def load_coralogix_config(yaml_data: Optional[dict] = None) -> CoralogixConfig:
    """Build CoralogixConfig from defaults <- YAML ``coralogix`` section <- env vars."""
    section = (yaml_data or {}).get("coralogix") or {}

    api_key = section.get("api_key", CoralogixConfig.api_key)
    application_name = section.get("application_name", CoralogixConfig.application_name)
    endpoint = section.get("endpoint", CoralogixConfig.endpoint)
    timeout = section.get("timeout", CoralogixConfig.timeout)

    return CoralogixConfig(
        api_key=os.environ.get("CORALOGIX_API_KEY", api_key),
        application_name=os.environ.get("CORALOGIX_APPLICATION_NAME", application_name),
        endpoint=os.environ.get("CORALOGIX_ENDPOINT", endpoint),
        timeout=float(os.environ.get("CORALOGIX_TIMEOUT", timeout)),
    )


def load_client_config(argv=None) -> ClientConfig:
    """Build ClientConfig from environment variables, then override with CLI args.

    Pass argv for testability; when None, argparse reads sys.argv.
    """
    env_sink = os.environ.get("LOG_SINK", ClientConfig.sink)
    env_subsystem = os.environ.get("LOG_SUBSYSTEM", ClientConfig.subsystem)
    env_config_file = os.environ.get("LOG_CONFIG_FILE", ClientConfig.config_file)
    env_min_severity = os.environ.get("LOG_MIN_SEVERITY")

    parser = argparse.ArgumentParser(description="Service logging demo client")
    parser.add_argument("--sink", type=str, choices=SINKS, default=None)
    parser.add_argument("--subsystem", type=str, default=None)
    parser.add_argument("--config", type=str, default=None)
    parser.add_argument("--min-severity", type=str, default=None)

    args = parser.parse_args(argv)

    min_severity = ClientConfig.min_severity
    raw_severity = args.min_severity if args.min_severity is not None else env_min_severity
    if raw_severity is not None:
        min_severity = Severity.parse(raw_severity)

    return ClientConfig(
        sink=args.sink if args.sink is not None else env_sink,
        subsystem=args.subsystem if args.subsystem is not None else env_subsystem,
        config_file=args.config if args.config is not None else env_config_file,
        min_severity=min_severity,
    )
