import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_WOOCOMMERCE_TIMEOUT = 30

WOOCOMMERCE_URL = "WOOCOMMERCE_URL"
WOOCOMMERCE_CONSUMER_KEY = "WOOCOMMERCE_CONSUMER_KEY"
WOOCOMMERCE_CONSUMER_SECRET = "WOOCOMMERCE_CONSUMER_SECRET"
WOOCOMMERCE_TIMEOUT = "WOOCOMMERCE_TIMEOUT"

WOOCOMMERCE_KEYS = (WOOCOMMERCE_URL, WOOCOMMERCE_CONSUMER_KEY, WOOCOMMERCE_CONSUMER_SECRET)


@dataclass(frozen=True)
class WooCommerceConfig:
    base_url: str
    consumer_key: str
    consumer_secret: str
    timeout: float = DEFAULT_WOOCOMMERCE_TIMEOUT


@dataclass(frozen=True)
class WooCommerceUnconfigured:
    missing: tuple = WOOCOMMERCE_KEYS


def env_flag(value, default=False):
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_app_config(environ=None):
    """
    Returns the settings the application factory copies into app.config.

    :param environ: mapping to read from, defaults to os.environ
    :return: dict of settings
    """
    environ = os.environ if environ is None else environ

    return {
        "DEBUG": env_flag(environ.get("FLASK_DEBUG")),
        "HOST": environ.get("PCBUILDER_HOST", DEFAULT_HOST),
        "PORT": int(environ.get("PORT", DEFAULT_PORT)),
        "SEED_CATALOG": env_flag(environ.get("PCBUILDER_SEED_CATALOG"), default=True),
        "COUNT_PSU_WATTAGE": env_flag(environ.get("PCBUILDER_COUNT_PSU_WATTAGE")),
        WOOCOMMERCE_URL: environ.get(WOOCOMMERCE_URL),
        WOOCOMMERCE_CONSUMER_KEY: environ.get(WOOCOMMERCE_CONSUMER_KEY),
        WOOCOMMERCE_CONSUMER_SECRET: environ.get(WOOCOMMERCE_CONSUMER_SECRET),
        WOOCOMMERCE_TIMEOUT: environ.get(WOOCOMMERCE_TIMEOUT, DEFAULT_WOOCOMMERCE_TIMEOUT),
    }


def load_woocommerce_config(settings):
    """
    Validates the three WooCommerce credentials once at start-up.

    :param settings: mapping holding the WOOCOMMERCE_* keys (app.config or os.environ)
    :return: WooCommerceConfig, or WooCommerceUnconfigured naming what is absent
    """
    missing = tuple(key for key in WOOCOMMERCE_KEYS if not str(settings.get(key) or "").strip())
    if missing:
        logger.warning(f"WooCommerce not configured - missing: {', '.join(missing)}")
        return WooCommerceUnconfigured(missing=missing)

    try:
        timeout = float(settings.get(WOOCOMMERCE_TIMEOUT) or DEFAULT_WOOCOMMERCE_TIMEOUT)
    except (TypeError, ValueError):
        logger.warning(f"Invalid {WOOCOMMERCE_TIMEOUT}, using {DEFAULT_WOOCOMMERCE_TIMEOUT}s")
        timeout = DEFAULT_WOOCOMMERCE_TIMEOUT

    return WooCommerceConfig(
        base_url=str(settings[WOOCOMMERCE_URL]).strip().rstrip("/"),
        consumer_key=str(settings[WOOCOMMERCE_CONSUMER_KEY]).strip(),
        consumer_secret=str(settings[WOOCOMMERCE_CONSUMER_SECRET]).strip(),
        timeout=timeout,
    )
