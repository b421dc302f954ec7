"""
Markdown directory importer for Blocktree.

This module reads markdown files from a directory tree and tracks which of
them changed between runs.
"""

import hashlib
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..models import MarkdownDocument
from .base import BaseImporter


class MarkdownDirectoryImporter(BaseImporter):
    """
    Importer for a directory of markdown files.

    A single file path is accepted as well and yields one document.
    """

    def __init__(self, root_path: str, state_file_path: Optional[str] = None, extension: str = ".md"):
        """
        Initialize the markdown directory importer.

        Args:
            root_path: Directory (or single file) to read markdown from
            state_file_path: JSON file recording content hashes between runs;
                defaults to 'blocktree_last_state.json' next to the root
            extension: File extension of markdown files
        """
        self.root_path = Path(root_path)
        self.extension = extension
        if state_file_path:
            self.last_state_file = Path(state_file_path)
        else:
            base_dir = self.root_path if self.root_path.is_dir() else self.root_path.parent
            self.last_state_file = base_dir / "blocktree_last_state.json"

        if not self.root_path.exists():
            logging.warning(f"Markdown source not found: {self.root_path}")

        logging.info(f"Initialized markdown importer for: {self.root_path}")

    def get_all_documents(self) -> List[MarkdownDocument]:
        """
        Read every markdown file under the root, in sorted path order.

        Files that cannot be read are logged and skipped.

        Returns:
            A list of MarkdownDocument objects
        """
        documents = []

        for file_path in self._find_markdown_files():
            try:
                content = file_path.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                logging.error(f"Failed to read markdown file {file_path}: {e}")
                continue

            document_id = self._document_id(file_path)
            documents.append(MarkdownDocument(
                document_id=document_id,
                source_ref=str(file_path),
                content=content
            ))

        logging.info(f"Loaded {len(documents)} markdown documents from {self.root_path}")
        return documents

    def _find_markdown_files(self) -> List[Path]:
        """Find markdown files under the root path."""
        if self.root_path.is_file():
            return [self.root_path]
        if not self.root_path.is_dir():
            return []
        return sorted(p for p in self.root_path.rglob(f"*{self.extension}") if p.is_file())

    def _document_id(self, file_path: Path) -> str:
        """Use the path relative to the root as a stable document id."""
        if self.root_path.is_dir():
            return file_path.relative_to(self.root_path).as_posix()
        return file_path.name

    def get_changed_documents(self) -> List[MarkdownDocument]:
        """Retrieve only documents whose content changed since the last run."""
        logging.info("Detecting changed documents...")
        current_documents = self.get_all_documents()
        current_state = self._calculate_state(current_documents)
        last_state = self._load_last_state()

        if not last_state:
            logging.info("No previous state found. Treating all documents as changed.")
            self._save_current_state(current_state)
            return current_documents

        changed_documents = []
        for document in current_documents:
            if last_state.get(document.document_id) != current_state[document.document_id]:
                logging.debug(f"Detected change in document: {document.document_id}")
                changed_documents.append(document)

        deleted_ids = set(last_state.keys()) - set(current_state.keys())
        if deleted_ids:
            logging.info(f"Detected {len(deleted_ids)} deleted documents.")

        self._save_current_state(current_state)
        logging.info(f"Found {len(changed_documents)} changed documents.")
        return changed_documents

    def _calculate_state(self, documents: List[MarkdownDocument]) -> Dict[str, str]:
        """Map each document id to the SHA-256 of its content."""
        return {
            document.document_id: hashlib.sha256(document.content.encode('utf-8')).hexdigest()
            for document in documents
        }

    def _load_last_state(self) -> Optional[Dict[str, str]]:
        """Load the last recorded state from the state file."""
        if not self.last_state_file.exists():
            return None
        try:
            with open(self.last_state_file, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logging.warning(f"Could not load last state file: {e}")
            return None

    def _save_current_state(self, state: Dict[str, str]):
        """Save the current state for future comparison."""
        try:
            with open(self.last_state_file, 'w', encoding='utf-8') as f:
                json.dump(state, f, indent=2)
        except IOError as e:
            logging.error(f"Failed to save current state: {e}")
