import logging
import sys

# HTTP client chatter only shows with --verbose
_HTTP_LOGGERS = ("httpx", "httpcore")
_RETRY_LOGGER = "banzuke_delta.ingest._retry"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr, keeping stdout for the banzuke output.

    *verbose* enables DEBUG for this package and the HTTP client. *quiet*
    keeps only errors, which also hides the per-attempt retry warnings.
    """
    root = logging.getLogger()
    root.handlers.clear()
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S"))
    root.addHandler(handler)

    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
    logging.getLogger(_RETRY_LOGGER).setLevel(logging.ERROR if quiet else logging.NOTSET)
