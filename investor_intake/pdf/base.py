from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    PAGE_SEPARATOR = "\n\n"

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        """Extract the text of every page, in page order.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One string per page. Pages without a text layer yield "".

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the whole document as one string, pages separated by a blank line."""
        return self.PAGE_SEPARATOR.join(self.extract_pages(pdf_bytes))
