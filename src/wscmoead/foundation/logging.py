from __future__ import annotations

import logging


def configure_wscmoead_logging(*, level: int = logging.INFO) -> None:
    """
    Configure a minimal console logger for wscmoead.

    Notes:
        - This is opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "wscmoead" logger has handlers.
    """
    root = logging.getLogger()
    pkg_logger = logging.getLogger("wscmoead")

    # If the user already configured logging, don't interfere.
    if root.handlers or pkg_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False


__all__ = ["configure_wscmoead_logging"]
