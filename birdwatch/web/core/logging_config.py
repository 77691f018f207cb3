from birdwatch.common.core.logging_config import setup_logging as common_setup_logging

from ..config import WebConfig


def setup_logging(config: WebConfig):
    """
    Load the YAML logging config named by LOG_CONFIG_PATH.
    """
    common_setup_logging(config.LOG_CONFIG_PATH)
