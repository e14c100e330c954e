import logging, sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

def setup_logging(level: str = "INFO", stream=sys.stdout):
    """Attach a single stdout handler to the root logger."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:  # uvicorn --reload imports us twice
        return
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    # urllib3 logs every request line at DEBUG
    logging.getLogger("urllib3").setLevel(max(root.level, logging.INFO))
