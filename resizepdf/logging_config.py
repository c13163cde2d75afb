# resizepdf/logging_config.py
import logging

# Marks the handler this module owns so reconfiguring never touches the host's
_HANDLER_NAME = "resizepdf"


def configure_logging(level_name: str = "INFO") -> None:
    """
    Attach a single stream handler to the root logger.

    Only the handler installed by an earlier call is replaced, so calling the
    app factory more than once (tests, reloader) does not duplicate every line
    and handlers from gunicorn or pytest stay in place.
    """
    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)

    root_logger = logging.getLogger()
    for h in list(root_logger.handlers):
        if h.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(h)
    root_logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )
    root_logger.addHandler(handler)

    root_logger.debug("Logging configured (level=%s)", level_name)
