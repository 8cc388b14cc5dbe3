#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wikirender/utils/io_utils.py
"""Output writing helpers shared by the renderers and the CLI."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from wikirender.exceptions import OutputWriteError

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    """Guess whether a file-like object expects bytes."""
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    # Default to text mode if we can't determine
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: OutputTarget) -> None:
    """Write rendered text to a path or a file-like object.

    Parameters
    ----------
    content : str
        Rendered markup
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive the
        UTF-8 encoding of ``content``; text streams receive it unchanged.

    Raises
    ------
    OutputWriteError
        If the destination cannot be written
    TypeError
        If ``output`` is not a path or a writable object

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("h1. Title\\n", buffer)
        >>> buffer.getvalue()
        b'h1. Title\\n'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    try:
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
    except OSError as e:
        raise OutputWriteError(getattr(output, "name", "<stream>"), original_error=e) from e


__all__ = ["OutputTarget", "write_content"]
