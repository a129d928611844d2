"""
Output writing for rendered reports.

Reports go either to a stream (stdout by default) or to a file. File writes
are atomic: the text lands in a temporary sibling first and is moved over the
destination only once fully written, so a failed run never leaves a truncated
report behind.
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO, Union

from .exceptions import OutputWriteError
from .logging_config import get_logger

logger = get_logger(__name__)


def write_output(
    text: str,
    destination: Optional[Union[str, Path]] = None,
    stream: Optional[TextIO] = None,
    fmt: str = "report",
) -> None:
    """
    Write rendered report text to a file or stream.

    Args:
        text: Fully rendered report
        destination: Target file (overwritten); None writes to ``stream``
        stream: Stream used when no destination is given (default: stdout)
        fmt: Format name, used for error context

    Raises:
        OutputWriteError: If the destination cannot be written
    """
    if destination is None:
        out = stream if stream is not None else sys.stdout
        out.write(text)
        if text and not text.endswith("\n"):
            out.write("\n")
        out.flush()
        return

    target = Path(destination)
    parent = target.parent
    if not parent.is_dir():
        raise OutputWriteError(target, f"parent directory does not exist: {parent}", fmt=fmt)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=parent)
    except OSError as e:
        raise OutputWriteError(target, str(e), fmt=fmt) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        # mkstemp creates 0600 files; reports are ordinary readable files
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, target)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except OSError:
            logger.debug(f"Could not remove temporary file {tmp_name}")
        raise OutputWriteError(target, str(e), fmt=fmt) from e

    logger.info(f"Wrote {fmt} output to {target}")
