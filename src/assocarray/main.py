import threading
from typing import Optional

from assocarray import logconfig

_INIT_LOCK = threading.Lock()
_logging_is_configured = False


def init(level: Optional[str] = None, force_reload: bool = False) -> None:
    """
    Configure logging for assocarray.

    Importing the package never touches logging configuration; applications
    which want the package's own handler (see :py:mod:`assocarray.logconfig`)
    should call this once at startup.

    ``init()`` may be called more than once. Only the first invocation will
    configure the logger unless ``force_reload=True``.
    """
    global _logging_is_configured

    with _INIT_LOCK:
        if _logging_is_configured and not force_reload:
            return

        logconfig.configure_root_logger(level=level)
        _logging_is_configured = True
