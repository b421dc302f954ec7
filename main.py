#!/usr/bin/env python3
"""
Blocktree - Markdown-to-Hierarchy Compiler

Main entry point for the Blocktree command line. Parses markdown documents
into flat block records, prints topic forests, and exports stored records
back to markdown.
"""

import logging
import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional

from blocktree import __version__
from blocktree.config import ConfigManager, config
from blocktree.identity import create_id_generator
from blocktree.importers import MarkdownDirectoryImporter
from blocktree.markdown import description, parse_markdown
from blocktree.models import FlatMdBlock
from blocktree.pipeline import aggregate_topics, export_markdown, ingest_markdown


def setup_logging(settings: ConfigManager = config):
    """Configure logging for the application."""
    level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_filename:
        handlers.append(logging.FileHandler(settings.log_filename))

    logging.basicConfig(
        level=level,
        format=settings.log_format,
        handlers=handlers
    )


def run_parse(file_path: str, id_kind: str, settings: ConfigManager) -> str:
    """
    Parse one markdown file into flat block records.

    Returns:
        The records as a JSON array, parent references under 'parentId'
    """
    markdown = Path(file_path).read_text(encoding='utf-8')
    id_generator = create_id_generator(id_kind or settings.id_generator_kind, settings.id_prefix)

    result = ingest_markdown(markdown, id_generator)
    records = [record.model_dump(mode='json', by_alias=True) for record in result.records]
    return json.dumps(records, indent=2, ensure_ascii=False)


def run_describe(file_path: str) -> str:
    """Print the description section of one markdown file."""
    return description(Path(file_path).read_text(encoding='utf-8'))


def run_topics(source_path: Optional[str], flat: bool, changed: bool, settings: ConfigManager) -> str:
    """
    Aggregate topics across a markdown file or directory.

    Without a path the configured import directory is read. With 'changed'
    only documents modified since the last run count, and the state file is
    updated.

    Returns:
        The topic forest (or its flat form) as JSON
    """
    importer = MarkdownDirectoryImporter(
        source_path or settings.import_path,
        state_file_path=settings.state_filename,
        extension=settings.markdown_extension
    )

    forests = []
    documents = importer.get_changed_documents() if changed else importer.get_all_documents()
    for document in documents:
        logging.debug(f"Collecting topics from {document.source_ref}")
        forests.extend(parse_markdown(document.content))

    summary = aggregate_topics(forests)
    nodes = summary.flat_forest if flat else summary.forest
    return json.dumps([node.model_dump() for node in nodes], indent=2, ensure_ascii=False)


def run_export(records_path: str) -> str:
    """Rebuild markdown from a JSON file of flat block records."""
    with open(records_path, 'r', encoding='utf-8') as f:
        raw_records = json.load(f)

    records = [FlatMdBlock.model_validate(record) for record in raw_records]
    return export_markdown(records)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Blocktree - Markdown-to-Hierarchy Compiler",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py parse notes.md                   # Print flat block records as JSON
  python main.py parse notes.md --ids counter     # Deterministic ids (id1, id2, ...)
  python main.py describe notes.md                # Print the text under the first heading
  python main.py topics ./notes                   # Print the topic forest of a directory
  python main.py topics ./notes --flat            # Print the flattened topic forest
  python main.py topics --changed                # Topics of documents changed since the last run
  python main.py export records.json              # Rebuild markdown from stored records
        """
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (default: config.yaml)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Blocktree {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a markdown file into flat block records")
    parse_cmd.add_argument("file", help="Markdown file to parse")
    parse_cmd.add_argument(
        "--ids",
        choices=["uuid", "counter"],
        default=None,
        help="Identifier generator to use (default: from configuration)"
    )

    describe_cmd = subparsers.add_parser("describe", help="Print the description section of a markdown file")
    describe_cmd.add_argument("file", help="Markdown file")

    topics_cmd = subparsers.add_parser("topics", help="Print the topic forest of markdown files")
    topics_cmd.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Markdown file or directory (default: import.default_path from configuration)"
    )
    topics_cmd.add_argument("--flat", action="store_true", help="Print the flattened forest")
    topics_cmd.add_argument(
        "--changed",
        action="store_true",
        help="Only include documents changed since the last run (updates the state file)"
    )

    export_cmd = subparsers.add_parser("export", help="Rebuild markdown from flat block records")
    export_cmd.add_argument("records", help="JSON file holding a list of flat block records")

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_arguments(argv)
    settings = ConfigManager(args.config) if args.config else config
    setup_logging(settings)

    try:
        if args.command == "parse":
            output = run_parse(args.file, args.ids, settings)
        elif args.command == "describe":
            output = run_describe(args.file)
        elif args.command == "topics":
            output = run_topics(args.path, args.flat, args.changed, settings)
        else:
            output = run_export(args.records)

        print(output)

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        print("\nInterrupted.")

    except Exception as e:
        logging.error(f"Command '{args.command}' failed: {e}")
        print(f"\nCommand failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
