from __future__ import annotations

import logging
import os


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    level_name = os.getenv("MUSICCTL_LOG_LEVEL")
    if level_name:
        named = getattr(logging, level_name.upper(), None)
        # only real level constants (DEBUG, INFO, ...), not other module attributes
        if isinstance(named, int):
            level = named

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
