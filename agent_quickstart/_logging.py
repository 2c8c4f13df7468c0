# Copyright (c) Microsoft. All rights reserved.

import logging

__all__ = ["get_logger", "setup_logging"]


def setup_logging(level: int = logging.INFO) -> None:
    """Setup the logging configuration for the samples built on agent_quickstart."""
    logging.basicConfig(
        format="[%(asctime)s - %(pathname)s:%(lineno)d - %(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        level=level,
    )


def get_logger(name: str = "agent_quickstart") -> logging.Logger:
    """Get a logger under the 'agent_quickstart' namespace.

    Args:
        name (str): The name of the logger. Defaults to 'agent_quickstart'.

    Raises:
        ValueError: When the name is outside the 'agent_quickstart' namespace.
    """
    if not name.startswith("agent_quickstart"):
        raise ValueError("Logger name must start with 'agent_quickstart'.")
    return logging.getLogger(name)
