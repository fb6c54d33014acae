import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the API server and the CLI."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
