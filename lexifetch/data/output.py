"""Output path derivation and writing."""

import os
import tempfile
from pathlib import Path

from lexifetch.core.errors import SetupError
from lexifetch.utils.constants import Constants
from lexifetch.utils.helpers import expand_file_path


def derive_output_path(input_path: str, output: str | None) -> Path:
    """Work out where the Markdown document goes.

    An ``output`` ending in .md is used as the file path. Anything else is
    treated as a directory, and the file is named after the input file.

    e.g. ('words.txt', 'notes/') -> notes/words.md, ('words.txt', 'a/b.md') -> a/b.md
    """
    expanded = expand_file_path(output)
    if not expanded:
        raise SetupError("No output location given")

    out = Path(expanded)
    if out.suffix == Constants.OUTPUT_EXTENSION:
        return out
    return out / Path(input_path).with_suffix(Constants.OUTPUT_EXTENSION).name


def write_output(path: Path, documents: list[str]) -> None:
    """Write the concatenated documents to ``path`` in one atomic replace.

    A temporary file is written in the target directory and renamed over the
    destination, so readers never see a partially written document.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("".join(documents))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
