import logging
import sys

LOGGER_NAME = "utilkit"


def setup_logging(debug: bool = False) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    if not debug:
        return

    logger.setLevel(logging.DEBUG)
    if not any(getattr(h, "_utilkit", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        handler._utilkit = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
