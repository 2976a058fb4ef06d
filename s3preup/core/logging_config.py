import logging

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or "INFO").upper()
    resolved_level = logging.getLevelNamesMapping().get(level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolved_level)

    # botocore is chatty at DEBUG and echoes request parameters
    logging.getLogger("botocore").setLevel(max(resolved_level, logging.INFO))

    _CONFIGURED = True
