"""
Matrix file IO and text rendering.

read_csv() loads numeric rows (no header) from delimited text through
pandas, or a 2D array from a .npy file. Every row must have the same
number of values; ragged rows, empty fields, non-numeric fields and empty
files raise MalformedInputError instead of being reinterpreted.

write_csv() writes 17 significant digits per value, so a read_csv() of
its output reproduces the matrix exactly.

format_matrix() renders the labelled grid used by str(Matrix):

    Matrix [2][2]:
    	[ ,0]	[ ,1]
    [0, ]	4 	7
    [1, ]	2 	6
"""

from __future__ import annotations

import re
from pathlib import Path
import numpy as np

from densematrix.core.exceptions import MalformedInputError
from densematrix.core.validation import check_array
from densematrix.core.matrix import Matrix, as_array


WHITESPACE = r'\s+'

_PARSER_LINE = re.compile(r'line (\d+)')


def read_csv(path: str | Path, *, delimiter: str = ',') -> Matrix:
    """
    Load a matrix from a delimited text file or a .npy file.

    Args:
        path: File to read
        delimiter: Field separator. ',' by default; pass r'\\s+' for
            whitespace-separated files. Spaces after the delimiter are
            ignored and blank lines are skipped.

    Returns:
        New Matrix with one row per non-blank line

    Raises:
        FileNotFoundError: If path does not exist
        MalformedInputError: If the contents do not form a numeric rectangle
    """
    path = Path(path)
    source = str(path)

    if path.suffix.lower() == '.npy':
        return _read_npy(path)

    import pandas as pd

    options = dict(
        header=None,
        sep=delimiter,
        skipinitialspace=True,
        skip_blank_lines=True,
        dtype=np.float64,
    )
    if len(delimiter) > 1 and delimiter != WHITESPACE:
        options['engine'] = 'python'
    else:
        # %.17g values written by write_csv() must parse back bit for bit
        options.update(engine='c', float_precision='round_trip')

    try:
        df = pd.read_csv(path, **options)
    except pd.errors.EmptyDataError as e:
        raise MalformedInputError(
            f"{source}: file contains no rows", source=source
        ) from e
    except pd.errors.ParserError as e:
        match = _PARSER_LINE.search(str(e))
        raise MalformedInputError(
            f"{source}: rows disagree in length ({e})",
            source=source,
            line=int(match.group(1)) if match else None,
        ) from e
    except ValueError as e:
        raise MalformedInputError(
            f"{source}: non-numeric value ({e})", source=source
        ) from e

    data = df.to_numpy(dtype=np.float64, copy=True)

    missing = np.isnan(data)
    if np.any(missing):
        row = int(np.argmax(missing.any(axis=1)))
        raise MalformedInputError(
            f"{source}: row {row + 1} has {int(np.sum(~missing[row]))} values, "
            f"expected {data.shape[1]} (ragged row or empty field)",
            source=source,
            line=row + 1,
        )

    return Matrix._adopt(data)


def _read_npy(path: Path) -> Matrix:
    source = str(path)
    try:
        raw = np.load(path, allow_pickle=False)
    except ValueError as e:
        raise MalformedInputError(f"{source}: not a numeric .npy array ({e})", source=source) from e
    data = check_array(raw, source)
    if data.ndim != 2:
        raise MalformedInputError(
            f"{source}: expected a 2D array, got shape {data.shape}", source=source
        )
    return Matrix._adopt(data.copy())


def write_csv(matrix: Matrix, path: str | Path, *, delimiter: str = ',') -> None:
    """
    Write a matrix as delimited text, one row per line.

    Args:
        matrix: Matrix to write
        path: Destination file (overwritten)
        delimiter: Field separator; r'\\s+' writes single spaces
    """
    sep = ' ' if delimiter == WHITESPACE else delimiter
    np.savetxt(Path(path), as_array(matrix), fmt='%.17g', delimiter=sep)


def format_matrix(matrix: Matrix) -> str:
    """Labelled grid with [ ,j] column headers and [i, ] row headers."""
    data = as_array(matrix)
    nrows, ncols = matrix.shape

    lines = [f"Matrix [{nrows}][{ncols}]:"]
    lines.append("\t" + "".join(f"[ ,{j}]\t" for j in range(ncols)))
    for i in range(nrows):
        lines.append(
            f"[{i}, ]\t" + "".join(f"{data[i, j]:g} \t" for j in range(ncols))
        )
    return "\n".join(lines)
