"""base exporter interface."""

from abc import ABC, abstractmethod

from changelog2html.core.models import VersionEntry


class Exporter(ABC):  # pylint: disable=too-few-public-methods
    """abstract base class for update log exporters."""

    @abstractmethod
    def export(
        self,
        entries: list[VersionEntry],
        destination: str,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> bool:
        """
        Export an update log to the destination.

        Args:
            entries: version entries in document order (last is current)
            destination: Where to write the export (interpretation varies by exporter)
            dry_run: If True, don't actually write anything
            overwrite: If True, overwrite existing content

        Returns:
            True if something was written
        """
        ...  # pylint: disable=unnecessary-ellipsis
