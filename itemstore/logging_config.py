import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "itemstore"


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as ``"debug"`` into its logging constant.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    resolved = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved, int):
        return logging.INFO
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    root = logging.getLogger()
    if not any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(resolve_level(level))

    # Access lines for every request are noise at INFO.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
