"""Logging helpers for calspan.

The library only ever logs through ``logging.getLogger(__name__)`` and is
silent until the application configures logging.
"""

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with a terse format.

    Mirrors ``logging.basicConfig``. Pass ``level=logging.DEBUG`` to see
    projections that overflow the datetime range; pass
    ``force=True`` to reconfigure during tests.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
