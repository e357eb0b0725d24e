import logging
from pathlib import Path
from typing import Union

from resource_docgen.exceptions import DocumentWriteError

logger = logging.getLogger(__name__)


def output_name(identifier: str) -> str:
    """Base file name of the page for a resource."""
    return f"resource_{identifier}"


class ResourceDocWriter:
    """Writes rendered pages into a directory, one file per resource."""

    def __init__(self, output_directory: Union[str, Path] = ".", extension: str = ".rst"):
        self.output_directory = Path(output_directory)
        self.extension = extension

    def path_for(self, identifier: str) -> Path:
        return self.output_directory / f"{output_name(identifier)}{self.extension}"

    def write(self, identifier: str, text: str) -> Path:
        """Write a page, replacing any previous one for the same resource."""
        path = self.path_for(identifier)
        try:
            self.output_directory.mkdir(parents=True, exist_ok=True)
            # newline="" keeps output byte-identical across platforms
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as e:
            raise DocumentWriteError(
                f"Cannot write page for {identifier}: {e.strerror}",
                path=str(path),
                cause=e,
            ) from e
        logger.debug(f"Wrote {path}")
        return path
