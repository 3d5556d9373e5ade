# hdfskit

Pure-Python building blocks for HDFS clients:

- **Erasure coding** (`hdfskit.gf256`, `hdfskit.matrix`, `hdfskit.ec`).
  `GF256` implements arithmetic in GF(2^8) with the reducing polynomial
  x^8+x^4+x^3+x^2+1. `Matrix` is a dense matrix that supports
  multiplication and Gauss-Jordan inversion. `Coder` is a Cauchy
  Reed-Solomon encoder and decoder whose encoding matrices match Hadoop's.
  `EcSchema` describes striped block layouts. `resolve_ec_policy` returns
  the built-in Hadoop erasure coding policies.
- **Records** (`hdfskit.models`). `WriteOptions` defaults to permission
  0o644, no overwrite and parent creation on. `FileStatus` holds file
  metadata; its `FileStatus.resolve_path` joins a name reported by a server
  onto the path that was queried. `ContentSummary` holds the usage totals
  of a tree.
- **Errors** (`hdfskit.errors`). Every error derives from `HdfsError`.
  Errors that have a built-in counterpart also derive from it. For example,
  `HdfsFileNotFoundError` is a `FileNotFoundError`, `AlreadyExistsError` is
  a `FileExistsError`, `HdfsIsADirectoryError` is an `IsADirectoryError`,
  `UnsupportedFeatureError` is a `NotImplementedError` and `HdfsIOError` is
  an `OSError`. The remaining errors derive from `RuntimeError`. `RPCError`
  and `FatalRPCError` carry the remote `exception_class` and `message`.

The package has no dependencies beyond the standard library.

## Install

```
pip install hdfskit
```

## Examples

Encode parity shards and recover lost data shards. `decode` returns a new
list; missing shards are given as `None`:

```python
from hdfskit.gf256 import Coder

coder = Coder(3, 2)
data = [b"abcd", b"efgh", b"ijkl"]
parity = coder.encode(data)
shards = coder.decode([None, data[1], None, *parity])
assert shards[0] == b"abcd" and shards[2] == b"ijkl"
```

If fewer shards than `data_units` remain, `decode` raises
`hdfskit.errors.ErasureCodingError`.

Look up a built-in erasure coding policy and split stripes into cells:

```python
from hdfskit.ec import resolve_ec_policy

schema = resolve_ec_policy(2)   # RS-3-2-1024k
print(schema.data_units, schema.parity_units, schema.cell_size)  # 3 2 1048576
print(schema.max_offset(0, 5 * 1024 * 1024))  # bytes held by internal block 0
```

Policy ids 1 to 5 are known. Any other id raises
`UnsupportedErasureCodingPolicyError`. `EcSchema.ec_decode` can rebuild
missing data stripes for the `rs` codec only.

Work with GF(2^8) values and matrices directly:

```python
from hdfskit.gf256 import GF256, Coder

assert GF256(3) * GF256(7) / GF256(7) == GF256(3)

m = Coder.gen_rs_matrix(3, 2)
m.select_rows([2, 3, 4])
original = m.copy()
m.invert()
assert m * original == type(m).identity(3, GF256(0), GF256(1))
```

Join a server-reported name onto a queried path:

```python
from hdfskit.models import FileStatus

FileStatus.resolve_path("/dir", b"file")   # "/dir/file"
FileStatus.resolve_path("/dir/file", b"")  # "/dir/file"
```

## What this package does not do

hdfskit does not connect to a cluster. It has no RPC or data-transfer
client, so it cannot list, read, write, rename or delete files on HDFS. It
does not load Hadoop configuration files (`core-site.xml`,
`hdfs-site.xml`). It does not resolve viewfs mount tables. It provides no
command-line tool.

## Tests

```
pip install -e .[test]
pytest
```