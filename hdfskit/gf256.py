"""Arithmetic in GF(2^8) and the Reed-Solomon coder built on it."""

from .errors import ErasureCodingError
from .matrix import Matrix

_MODULUS = 0b1_0001_1101


def _build_tables():
    exp = [0] * 510
    log = [0] * 256
    x = 1
    for i in range(255):
        exp[i] = x
        exp[i + 255] = x
        log[x] = i
        x <<= 1
        if x & 0x100:
            x ^= _MODULUS
    return exp, log


_EXP, _LOG = _build_tables()


class GF256:
    """An element of GF(2^8) with reducing polynomial x^8+x^4+x^3+x^2+1."""

    __slots__ = ("value",)

    def __init__(self, value=0):
        value = int(value)
        if not 0 <= value <= 255:
            raise ValueError(f"GF256 value out of range: {value}")
        self.value = value

    def __add__(self, other):
        if not isinstance(other, GF256):
            return NotImplemented
        return GF256(self.value ^ other.value)

    def __sub__(self, other):
        if not isinstance(other, GF256):
            return NotImplemented
        return GF256(self.value ^ other.value)

    def __mul__(self, other):
        if not isinstance(other, GF256):
            return NotImplemented
        if self.value == 0 or other.value == 0:
            return GF256(0)
        return GF256(_EXP[_LOG[self.value] + _LOG[other.value]])

    def __truediv__(self, other):
        if not isinstance(other, GF256):
            return NotImplemented
        if other.value == 0:
            raise ZeroDivisionError("division by zero in GF256")
        if self.value == 0:
            return GF256(0)
        return GF256(_EXP[(_LOG[self.value] - _LOG[other.value]) % 255])

    def __int__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, GF256):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"GF256({self.value})"

    def is_zero(self):
        return self.value == 0

    def is_one(self):
        return self.value == 1


class Coder:
    """Reed-Solomon encoder and decoder using a Cauchy matrix, as Hadoop does."""

    def __init__(self, data_units, parity_units):
        self.data_units = data_units
        self.parity_units = parity_units
        self.encode_matrix = Coder.gen_rs_matrix(data_units, parity_units)

    @staticmethod
    def gen_rs_matrix(data_units, parity_units):
        """Build the encoding matrix: identity on top, Cauchy rows for parity."""
        matrix = Matrix.zeroes(data_units + parity_units, data_units, GF256(0))
        for r in range(data_units):
            matrix[r, r] = GF256(1)

        for r in range(data_units, data_units + parity_units):
            for c in range(data_units):
                total = GF256(r & 0xFF) + GF256(c & 0xFF)
                matrix[r, c] = total if total.is_zero() else GF256(1) / total
        return matrix

    def encode(self, data):
        """Compute the parity shards for a sequence of equally sized data shards."""
        data = [bytes(shard) for shard in data]
        if len(data) != self.data_units:
            raise ValueError(
                f"expected {self.data_units} data shards, got {len(data)}"
            )
        if any(len(shard) != len(data[0]) for shard in data):
            raise ValueError("all data shards must have the same length")

        parity_matrix = self.encode_matrix.copy()
        parity_matrix.select_rows(
            range(self.data_units, self.data_units + self.parity_units)
        )
        parity = parity_matrix.multiply_rows(data, GF256)
        return [bytes(int(value) for value in row) for row in parity.to_lists()]

    def decode(self, shards):
        """Return a copy of ``shards`` with any missing data shards rebuilt.

        Missing shards are ``None``. Missing parity shards are left as ``None``.
        Raises ErasureCodingError if too few shards are present.
        """
        shards = list(shards)
        valid_indices = []
        missing_data = []
        data_matrix = []

        for i, shard in enumerate(shards):
            if shard is not None:
                if len(data_matrix) < self.data_units:
                    data_matrix.append(shard)
                valid_indices.append(i)
            elif i < self.data_units:
                missing_data.append(i)

        if not missing_data:
            return shards

        if len(valid_indices) < self.data_units:
            raise ErasureCodingError("Not enough valid shards")

        decode_matrix = self.encode_matrix.copy()
        decode_matrix.select_rows(valid_indices[: self.data_units])
        decode_matrix.invert()
        decode_matrix.select_rows(missing_data)

        recovered = decode_matrix.multiply_rows(data_matrix, GF256)
        for index, row in zip(missing_data, recovered.to_lists()):
            shards[index] = bytes(int(value) for value in row)
        return shards