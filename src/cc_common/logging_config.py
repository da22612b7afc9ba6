"""Root logger setup.

Called once from the application lifespan. A logger that already has
handlers (pytest's capture, uvicorn's --log-config) is left untouched.
"""

import logging


def setup_logging(level: str = "INFO", logger: logging.Logger | None = None) -> None:
    """Attach a console handler to `logger` (default: root) and set its level."""
    target = logger or logging.getLogger()
    if target.handlers:
        return

    target.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    target.addHandler(handler)
