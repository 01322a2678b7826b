import yaml
import os
import logging
from dotenv import load_dotenv

DEFAULT_CONFIG = {
    "system": {
        "log_level": "INFO",
        "log_file": None,
        "symbol": "BTC/USDT",
        "timeframe": "1h",
    },
    "detection": {},
    "store": {
        "capacity": 500,
    },
    "scanner": {
        "analyze_partial_bars": False,
    },
}


def load_config(config_path="config.yaml"):
    """
    Loads configuration from a YAML file.
    Sections missing from the file are filled from DEFAULT_CONFIG.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logging.error(f"Error parsing config file: {e}")
            raise e

    merged = {}
    for section, defaults in DEFAULT_CONFIG.items():
        merged[section] = {**defaults, **(config.get(section) or {})}
    for section, values in config.items():
        merged.setdefault(section, values)
    return merged


def load_environment(env_path=".env"):
    """
    Loads environment overrides from a specific .env file.
    """
    load_dotenv(env_path)

    return {
        "log_level": os.getenv("SMC_LOG_LEVEL"),
        "log_file": os.getenv("SMC_LOG_FILE"),
    }
