"""Dense matrices over an arbitrary field, used for Reed-Solomon coding."""


class Matrix:
    """A rectangular matrix of field elements supporting +, -, * and /."""

    __slots__ = ("_data",)

    def __init__(self, data):
        rows = [list(row) for row in data]
        if not rows:
            raise ValueError("matrix must have at least one row")
        width = len(rows[0])
        if width == 0:
            raise ValueError("matrix must have at least one column")
        if any(len(row) != width for row in rows):
            raise ValueError("all matrix rows must have the same length")
        self._data = rows

    @staticmethod
    def zeroes(rows, cols, zero=0):
        """Return a rows x cols matrix filled with ``zero``."""
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        return Matrix([[zero] * cols for _ in range(rows)])

    @staticmethod
    def identity(size, zero=0, one=1):
        """Return the size x size identity matrix."""
        matrix = Matrix.zeroes(size, size, zero)
        for i in range(size):
            matrix[i, i] = one
        return matrix

    def rows(self):
        return len(self._data)

    def cols(self):
        return len(self._data[0])

    def __getitem__(self, index):
        row, col = index
        return self._data[row][col]

    def __setitem__(self, index, value):
        row, col = index
        self._data[row][col] = value

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self._data!r})"

    def _units(self):
        kind = type(self._data[0][0])
        return kind(0), kind(1)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols() != other.rows():
            raise ValueError("matrix dimensions do not allow multiplication")
        zero, _ = self._units()
        columns = list(zip(*other._data))
        return Matrix(
            [[_dot(row, column, zero) for column in columns] for row in self._data]
        )

    def copy(self):
        return Matrix(self._data)

    def select_rows(self, rows):
        """Keep only the rows whose indices are given, in their original order."""
        wanted = set(rows)
        self._data = [row for i, row in enumerate(self._data) if i in wanted]

    def invert(self):
        """Invert this square matrix in place by Gauss-Jordan elimination."""
        size = self.rows()
        if size != self.cols():
            raise ValueError("Cannot invert a non-square matrix")
        zero, one = self._units()

        data = [
            row + [one if i == j else zero for j in range(size)]
            for i, row in enumerate(self._data)
        ]

        for r in range(size):
            if data[r][r] == zero:
                for swap in range(r + 1, size):
                    if data[swap][r] != zero:
                        data[r], data[swap] = data[swap], data[r]
            if data[r][r] == zero:
                raise ValueError("Matrix is singular")

            if data[r][r] != one:
                scale = one / data[r][r]
                data[r] = [value * scale for value in data[r]]

            pivot_row = data[r]
            for below in range(r + 1, size):
                factor = data[below][r]
                if factor != zero:
                    data[below] = [
                        value - pivot * factor
                        for value, pivot in zip(data[below], pivot_row)
                    ]

        for r in range(1, size):
            for above in range(r):
                factor = data[above][r]
                if factor != zero:
                    data[above] = [
                        value - pivot * factor
                        for value, pivot in zip(data[above], data[r])
                    ]

        self._data = [row[size:] for row in data]

    def multiply_rows(self, rows, convert=None):
        """Multiply this matrix by a list of equally long rows of raw values.

        ``convert`` maps each raw value (for example a byte) into the field
        element type held by this matrix.
        """
        rows = list(rows)
        if self.cols() != len(rows):
            raise ValueError("matrix dimensions do not allow multiplication")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        if convert is not None:
            rows = [[convert(value) for value in row] for row in rows]

        zero, _ = self._units()
        result = []
        for lhs_row in self._data:
            accumulated = [zero] * width
            for coefficient, rhs_row in zip(lhs_row, rows):
                if coefficient == zero:
                    continue
                accumulated = [
                    total + coefficient * value
                    for total, value in zip(accumulated, rhs_row)
                ]
            result.append(accumulated)
        return Matrix(result)

    def to_lists(self):
        """Return the matrix contents as a fresh list of row lists."""
        return [list(row) for row in self._data]


def _dot(left, right, zero):
    total = zero
    for a, b in zip(left, right):
        total = total + a * b
    return total