from __future__ import annotations

import logging
import os
from pathlib import Path

from .errors import FileReadError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"


def read_text(path: str | os.PathLike[str], *, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the contents of ``path`` decoded with ``encoding``.

    The default codec strips a leading UTF-8 byte order mark.  Any I/O or
    decoding failure is reported as :class:`FileReadError`.
    """
    p = Path(path)
    logger.debug("Reading INI file %s (%s)", p, encoding)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        logger.warning("Failed to read INI file %s: %s", p, exc)
        raise FileReadError(str(p), str(exc)) from exc
