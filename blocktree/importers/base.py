"""
Base importer interface for Blocktree.

This module defines the abstract interface that all document importers must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import MarkdownDocument


class BaseImporter(ABC):
    """
    Abstract base class for all document importers.

    Each importer delivers raw markdown documents from a specific source to
    the ingestion pipeline.
    """

    @abstractmethod
    def get_all_documents(self) -> List[MarkdownDocument]:
        """
        Retrieve all documents from the source.

        Returns:
            List of MarkdownDocument objects
        """
        pass

    @abstractmethod
    def get_changed_documents(self) -> List[MarkdownDocument]:
        """
        Retrieve only documents that have changed since the last run.

        Returns:
            List of MarkdownDocument objects that have been added or modified
        """
        pass
