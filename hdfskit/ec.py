"""Erasure coding schemas and decoding of striped block data."""

from dataclasses import dataclass

from .errors import UnsupportedErasureCodingPolicyError
from .gf256 import Coder

RS_CODEC_NAME = "rs"
RS_LEGACY_CODEC_NAME = "rs-legacy"
XOR_CODEC_NAME = "xor"
DEFAULT_EC_CELL_SIZE = 1024 * 1024


@dataclass(frozen=True)
class EcSchema:
    """Layout of an erasure coded block group."""

    codec_name: str
    data_units: int
    parity_units: int
    cell_size: int

    def row_size(self):
        """Number of data bytes in one full row of cells."""
        return self.cell_size * self.data_units

    def cell_for_offset(self, offset):
        """Return the 0-based cell number containing ``offset``."""
        return offset // self.cell_size

    def row_for_cell(self, cell_id):
        return cell_id // self.data_units

    def offset_for_row(self, row_id):
        return row_id * self.cell_size

    def max_offset(self, index, block_size):
        """Return the number of bytes stored in the internal block ``index``."""
        # Parity cells are as long as the first data block.
        if index >= self.data_units:
            index = 0

        full_rows = block_size // self.row_size()
        remaining = block_size - full_rows * self.row_size()

        if remaining < index * self.cell_size:
            last_row = 0
        elif remaining > (index + 1) * self.cell_size:
            last_row = self.cell_size
        else:
            last_row = remaining - index * self.cell_size
        return full_rows * self.cell_size + last_row

    def ec_decode(self, vertical_stripes):
        """Rebuild missing data stripes and return the data cells in file order.

        ``vertical_stripes`` holds one entry per internal block, data blocks
        first; missing blocks are ``None``.
        """
        stripes = list(vertical_stripes)
        data_missing = any(
            stripe is None for stripe in stripes[: self.data_units]
        )
        if data_missing:
            if self.codec_name != RS_CODEC_NAME:
                raise UnsupportedErasureCodingPolicyError(
                    f"codec: {self.codec_name}"
                )
            stripes = Coder(self.data_units, self.parity_units).decode(stripes)

        data_stripes = [bytes(stripe) for stripe in stripes[: self.data_units]]
        cells = []
        position = 0
        while position < len(data_stripes[0]):
            end = position + self.cell_size
            cells.extend(stripe[position:end] for stripe in data_stripes)
            position = end
        return cells


_BUILTIN_POLICIES = {
    # RS-6-3-1024k
    1: EcSchema(RS_CODEC_NAME, 6, 3, DEFAULT_EC_CELL_SIZE),
    # RS-3-2-1024k
    2: EcSchema(RS_CODEC_NAME, 3, 2, DEFAULT_EC_CELL_SIZE),
    # RS-LEGACY-6-3-1024k
    3: EcSchema(RS_LEGACY_CODEC_NAME, 6, 3, DEFAULT_EC_CELL_SIZE),
    # XOR-2-1-1024k
    4: EcSchema(XOR_CODEC_NAME, 2, 1, DEFAULT_EC_CELL_SIZE),
    # RS-10-4-1024k
    5: EcSchema(RS_CODEC_NAME, 10, 4, DEFAULT_EC_CELL_SIZE),
}


def resolve_ec_policy(policy_id, schema=None):
    """Return the schema for a policy.

    An explicit ``schema`` sent with the policy wins; otherwise the policy id
    is looked up among the built-in policies.
    """
    if schema is not None:
        return schema
    try:
        return _BUILTIN_POLICIES[policy_id]
    except KeyError:
        raise UnsupportedErasureCodingPolicyError(f"ID: {policy_id}") from None