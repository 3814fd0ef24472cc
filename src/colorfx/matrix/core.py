"""Fixed-size color matrices.

A ColorMatrix has ``columns`` x ``rows`` float32 coefficients stored
row-major. Applying it to color components follows the padding policy:

- ``columns <= 4``: standard product over the first ``columns`` components
- ``columns > 4``: extra columns are added as constant offsets (affine form,
  as in the 5x4 SVG ``feColorMatrix``)
- ``rows < 4``: remaining components (e.g. alpha) pass through unchanged

Example:
    >>> m = ColorMatrix(3, 3, [1, 0, 0, 0, 1, 0, 0, 0, 1])
    >>> m.transformed_color_components([0.2, 0.4, 0.6, 0.5])
    array([0.2, 0.4, 0.6, 0.5], dtype=float32)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from colorfx.components import COLOR_COMPONENT_COUNT, as_color_components
from colorfx.matrix.kernels import transform_components_numba
from colorfx.types import ColorComponentsLike, MatrixRows


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int | np.integer):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return int(value)


@dataclass(frozen=True, eq=False)
class ColorMatrix:
    """Immutable color matrix with fixed dimensions.

    Attributes:
        columns: Number of columns (C)
        rows: Number of rows (R)
        coefficients: Row-major coefficients [R * C], read-only float32

    Construction requires exactly ``rows * columns`` coefficients.
    Equality is exact per coefficient and only defined between matrices
    of the same dimensions.
    """

    columns: int
    rows: int
    coefficients: NDArray[np.float32]

    def __post_init__(self) -> None:
        columns = _check_dimension("columns", self.columns)
        rows = _check_dimension("rows", self.rows)

        values = np.array(self.coefficients, dtype=np.float32)
        if values.ndim != 1:
            raise ValueError(
                f"coefficients must be a flat row-major sequence, got shape {values.shape}"
            )
        if values.size != columns * rows:
            raise ValueError(
                f"ColorMatrix with {columns} columns and {rows} rows expects "
                f"{columns * rows} coefficients, got {values.size}"
            )
        values.setflags(write=False)

        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "coefficients", values)

    @classmethod
    def from_rows(cls, rows: MatrixRows) -> ColorMatrix:
        """Create a matrix from nested rows.

        :param rows: R rows of C coefficients each
        :returns: ColorMatrix with C columns and R rows
        :raises ValueError: If rows is not two-dimensional
        """
        array = np.asarray(rows, dtype=np.float32)
        if array.ndim != 2:
            raise ValueError(f"rows must be two-dimensional, got shape {array.shape}")
        return cls(array.shape[1], array.shape[0], array.ravel())

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns), matching NumPy convention."""
        return (self.rows, self.columns)

    def at(self, row: int, column: int) -> float:
        """Coefficient at ``row``, ``column``.

        Indices outside the matrix are a caller error.
        """
        assert 0 <= row < self.rows, f"row {row} out of range for {self.rows} rows"
        assert (
            0 <= column < self.columns
        ), f"column {column} out of range for {self.columns} columns"
        return float(self.coefficients[row * self.columns + column])

    def to_array(self) -> NDArray[np.float32]:
        """Return a writable copy of the coefficients as [rows, columns]."""
        return self.coefficients.reshape(self.rows, self.columns).copy()

    def check_row_count(self) -> None:
        """Ensure this matrix can transform color components.

        :raises ValueError: If the matrix has more rows than there are components
        """
        if self.rows > COLOR_COMPONENT_COUNT:
            raise ValueError(
                f"ColorMatrix has {self.rows} rows but color components only have "
                f"{COLOR_COMPONENT_COUNT} values"
            )

    def transformed_color_components(
        self, components: ColorComponentsLike
    ) -> NDArray[np.float32]:
        """Apply this matrix to color components.

        For every output row r < rows::

            result[r] = sum(at(r, c) * components[c] for c < min(columns, 4))
                      + sum(at(r, c) for 4 <= c < columns)

        Components at index >= rows are copied unchanged.

        :param components: Single color [4] or batch [..., 4]
        :returns: New float32 array with the same shape as ``components``
        :raises ValueError: If rows > 4 or components have the wrong size
        """
        self.check_row_count()
        components = as_color_components(components)

        batch = components.reshape(-1, COLOR_COMPONENT_COUNT)
        out = np.empty_like(batch)
        transform_components_numba(batch, self.coefficients, self.columns, self.rows, out)
        return out.reshape(components.shape)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorMatrix) or other.shape != self.shape:
            return NotImplemented
        return bool(np.array_equal(self.coefficients, other.coefficients))

    def __hash__(self) -> int:
        return hash((self.columns, self.rows, tuple(self.coefficients.tolist())))

    def __repr__(self) -> str:
        rows = np.array2string(self.to_array(), separator=", ")
        return f"ColorMatrix(columns={self.columns}, rows={self.rows}, coefficients={rows})"


def color_matrix(columns: int, rows: int, *coefficients: float) -> ColorMatrix:
    """Create a ColorMatrix from individual coefficients.

    :param columns: Number of columns
    :param rows: Number of rows
    :param coefficients: Exactly ``columns * rows`` values, row-major
    :returns: ColorMatrix
    """
    return ColorMatrix(columns, rows, coefficients)
