"""Formatting helpers and histogram binning."""

from collections.abc import Sequence

from gnuplot_pipe.exceptions import ValidationError


def format_number(value: float) -> str:
    """Return the shortest decimal text that reads back as the same float."""
    return repr(float(value))


def quote_double(text: str, escape: bool = True) -> str:
    r"""Wrap text in double quotes for a command argument.

    Args:
        text (str): Text to quote.
        escape (bool, optional): Backslash-escape ``\`` and ``"`` inside the text.
            If False the text is inserted verbatim. Defaults to True.

    Returns:
        str: The quoted argument.

    """
    if escape:
        text = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def quote_single(text: str, escape: bool = True) -> str:
    """Wrap text in single quotes, doubling embedded single quotes when escaping."""
    if escape:
        text = text.replace("'", "''")
    return f"'{text}'"


def compute_histogram(
    edges: Sequence[float],
    raw_values: Sequence[float],
    nbins: int,
    include_outliers: bool = False,
    sentinel: float | None = 0.0,
) -> list[float]:
    r"""Count raw values into ``nbins`` bins.

    Bin ``i`` covers the half-open interval ``[edges[i], edges[i + 1])`` for
    ``i < nbins - 1``. The scan stops at the first value equal to ``sentinel``,
    which is not counted; pass ``sentinel=None`` to scan every value.

    With ``include_outliers``, values at or below ``edges[0]`` go to the first
    bin and values at or above ``edges[nbins - 1]`` go to the last bin. Every
    value is counted at most once.

    Args:
        edges (Sequence[float]): Ascending bin edges; at least ``nbins`` of them.
        raw_values (Sequence[float]): Data to bin.
        nbins (int): Number of bins.
        include_outliers (bool, optional): Fold out-of-range values into the end bins.
        sentinel (float | None, optional): End-of-data marker. Defaults to 0.0.

    Returns:
        list[float]: ``nbins`` counts.

    Raises:
        ValidationError: If ``nbins`` is less than 1 or there are fewer than ``nbins`` edges.

    Examples:
        ```python
        compute_histogram([0, 1, 2, 3], [0.5, 1.5, 1.5, 0], 3)  # [1.0, 2.0, 0.0]
        ```

    """
    if nbins < 1:
        msg = f"Number of bins must be at least 1, got {nbins}"
        raise ValidationError(msg)
    if len(edges) < nbins:
        msg = f"Need at least {nbins} bin edges, got {len(edges)}"
        raise ValidationError(msg)

    counts = [0.0] * nbins
    low, high = edges[0], edges[nbins - 1]

    for value in raw_values:
        if sentinel is not None and value == sentinel:
            break

        if include_outliers and value <= low:
            counts[0] += 1
        elif include_outliers and value >= high:
            counts[nbins - 1] += 1
        else:
            for i in range(nbins - 1):
                if edges[i] <= value < edges[i + 1]:
                    counts[i] += 1
                    break

    return counts
