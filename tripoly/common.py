"""File helpers for the command-line tool.

 - open_maybe_stdin / open_maybe_stdout: treat "-" as the standard streams
 - AtomicWriteableFile: write a file only if writing finishes cleanly
"""

from contextlib import contextmanager
import os
import shutil
import sys
import tempfile

@contextmanager
def AtomicWriteableFile(dst, mode="w"):
    """A writeable file handle that does not overwrite until it is closed.

    Usage:

        with AtomicWriteableFile(path) as f:
            ... f.write(...) ...

    If the block exits with an exception, nothing is written to `dst`.  The
    tool relies on this so that malformed input never leaves a partial
    results file behind.
    """
    tmp_fd, tmp_path = tempfile.mkstemp(text=True)
    try:
        with os.fdopen(tmp_fd, mode) as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
    except BaseException:
        os.remove(tmp_path)
        raise
    shutil.move(src=tmp_path, dst=dst)

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    The caller is responsible for closing the returned handle:

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def open_maybe_stdout(f : str, mode="w"):
    """Open file f, or open standard output if f is "-".

    Regular files are opened as an AtomicWriteableFile.
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdout.fileno()), mode)
    return AtomicWriteableFile(f, mode)
