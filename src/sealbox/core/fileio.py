""" Whole-file read/write helpers used by seal_file / open_file. """

import logging
import os
import tempfile
from pathlib import Path

from .exceptions import FileIOError

logger = logging.getLogger(__name__)


def read_file_bytes(path) -> bytes:
    # Reads the entire file into memory; sealed files are never streamed.
    p = Path(path).expanduser()
    try:
        with open(p, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise FileIOError(p, "read", exc) from exc
    logger.debug("read %d bytes from %s", len(data), p)
    return data


def write_file_bytes(path, data: bytes) -> Path:
    """
    Write ``data`` to ``path`` via a temp file in the same directory.

    The temp file is moved into place with :func:`os.replace` only after
    every byte is written, so a failed write never leaves a partial output
    behind. Returns the final path.
    """
    p = Path(path).expanduser()
    tmp_path = None
    replaced = False
    try:
        with tempfile.NamedTemporaryFile(
            dir=p.parent,
            prefix=f".{p.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmpf:
            tmp_path = Path(tmpf.name)
            tmpf.write(data)
            tmpf.flush()
            os.fsync(tmpf.fileno())
        os.replace(tmp_path, p)
        replaced = True
    except OSError as exc:
        raise FileIOError(p, "write", exc) from exc
    finally:
        # Also runs on KeyboardInterrupt: the temp file may hold plaintext.
        if tmp_path is not None and not replaced:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass
    logger.debug("wrote %d bytes to %s", len(data), p)
    return p
