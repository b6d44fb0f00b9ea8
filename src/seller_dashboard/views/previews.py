"""Local image previews for the product form."""

import logging
import shutil
import tempfile
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class PreviewSet:
    """
    Transient preview copies of the images selected for a new product.

    Previews are local files only meant for display; they are never sent to
    the API. Each ``replace`` releases the previous previews before creating
    new ones, and ``release`` deletes them after a successful submission. The
    set is also a context manager that releases on exit.
    """

    def __init__(self, root: str | Path | None = None):
        """
        Args:
            root: Directory under which preview directories are created
                (defaults to the system temp directory)
        """
        self.root = Path(root) if root else None
        self.sources: list[Path] = []
        self.previews: list[Path] = []
        self._directory: Path | None = None

    @property
    def active(self) -> bool:
        return self._directory is not None

    def replace(self, paths: Iterable[str | Path]) -> list[str]:
        """
        Release current previews and create previews for ``paths``.

        Args:
            paths: Image files chosen by the seller

        Returns:
            Preview file paths, in selection order
        """
        self.release()
        sources = [Path(p) for p in paths if p]
        if not sources:
            return []

        directory = Path(tempfile.mkdtemp(prefix="seller-preview-", dir=self.root))
        self._directory = directory
        try:
            for i, source in enumerate(sources):
                preview = directory / f"{i:02d}-{source.name}"
                shutil.copyfile(source, preview)
                self.previews.append(preview)
        except OSError:
            self.release()
            raise

        self.sources = sources
        logger.debug(f"Created {len(self.previews)} image previews in {directory}")
        return [str(p) for p in self.previews]

    def is_local(self, url: str) -> bool:
        """True when ``url`` names one of the selected files or their previews."""
        local = {str(p) for p in (*self.sources, *self.previews)}
        local |= {p.as_uri() for p in (*self.sources, *self.previews) if p.is_absolute()}
        return url in local

    def release(self) -> None:
        """Delete every preview; safe to call repeatedly."""
        if self._directory is not None:
            shutil.rmtree(self._directory, ignore_errors=True)
            logger.debug(f"Released image previews in {self._directory}")
        self._directory = None
        self.sources = []
        self.previews = []

    def __enter__(self) -> "PreviewSet":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()
