from pathlib import Path

from investor_intake.processor.models import DocumentHandle


class FileLoader:
    """Reads a PDF from the local filesystem into a DocumentHandle."""

    ALLOWED_SUFFIXES = frozenset({".pdf"})

    def load(self, path: Path) -> DocumentHandle:
        """Read document bytes from disk.

        Raises:
            FileNotFoundError: if the file does not exist.
            ValueError: if the file is not a PDF by extension.
        """
        if path.suffix.lower() not in self.ALLOWED_SUFFIXES:
            raise ValueError(f"Unsupported document type '{path.suffix}': {path.name}")
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return DocumentHandle(name=path.name, data=path.read_bytes())
