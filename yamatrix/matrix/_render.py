"""
Plain-text rendering of matrix contents.

Row-major, every element followed by a single space, every row followed
by a newline. Diagnostic output only; there is no parser for it.
"""

from typing import Any, TextIO

from numpy.typing import NDArray


def render_rows(data: NDArray[Any]) -> str:
    """Render a 2-D array as space-separated lines."""
    return "".join(
        "".join(f"{value} " for value in row) + "\n"
        for row in data.tolist()
    )


def write_rows(data: NDArray[Any], stream: TextIO) -> TextIO:
    """Write the rendering of ``data`` to ``stream`` and return the stream."""
    stream.write(render_rows(data))
    return stream
