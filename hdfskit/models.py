"""Plain data records exchanged with the client: write options and file metadata."""

from dataclasses import dataclass


@dataclass
class WriteOptions:
    """Options for creating a new file.

    ``block_size`` and ``replication`` default to the server's settings when
    left as None. ``permission`` is the raw octal Unix permission (0o644 is
    ``rw-r--r--``). With ``overwrite`` an existing file is replaced. With
    ``create_parent`` missing parent directories are created; otherwise a
    missing parent is an error.
    """

    block_size: int | None = None
    replication: int | None = None
    permission: int = 0o644
    overwrite: bool = False
    create_parent: bool = True


@dataclass(frozen=True)
class FileStatus:
    """Metadata of a single file or directory."""

    path: str
    length: int
    isdir: bool
    permission: int
    owner: str
    group: str
    modification_time: int
    access_time: int
    replication: int | None = None
    blocksize: int | None = None

    @staticmethod
    def resolve_path(base_path, relative):
        """Join the name reported by the server onto the path that was queried.

        ``relative`` may be ``str`` or ``bytes``. An empty name, or one that
        is not valid UTF-8, leaves ``base_path`` unchanged. An absolute name
        replaces the base entirely.
        """
        if isinstance(relative, (bytes, bytearray, memoryview)):
            try:
                relative = bytes(relative).decode("utf-8")
            except UnicodeDecodeError:
                return base_path
        if not relative:
            return base_path
        if relative.startswith("/"):
            return relative
        if not base_path or base_path.endswith("/"):
            return base_path + relative
        return f"{base_path}/{relative}"


@dataclass(frozen=True)
class ContentSummary:
    """Aggregate usage of the tree rooted at a path."""

    length: int
    file_count: int
    directory_count: int
    quota: int
    space_consumed: int
    space_quota: int