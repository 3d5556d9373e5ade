"""HDFS building blocks: GF(2^8) Reed-Solomon erasure coding, data records and errors."""

__version__ = "0.1.0"

__all__ = ["ec", "errors", "gf256", "matrix", "models"]