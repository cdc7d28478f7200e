"""
Command line interface.

Commands: index, index-file, search, stats, list, clear, serve.
Exit status is 0 on success, 1 on errors and 2 when a file was only
partially indexed.

Dependencies: argparse (stdlib), ragindex.application, ragindex.api
System role: CLI entry point (console script "ragindex")
"""

import argparse
import logging
import signal
import sys
import threading
from collections.abc import Callable, Sequence

from ragindex.application.services import RagService
from ragindex.configs import get_settings
from ragindex.core.exceptions import PartialIndexingError, RagIndexError
from ragindex.models import FileIndexResult, FileIndexStatus
from ragindex.observability import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PARTIAL = 2


def _print_file_result(result: FileIndexResult) -> None:
    if result.status == FileIndexStatus.SKIPPED:
        print(f"Skipped (already indexed): {result.path}")
    elif result.status == FileIndexStatus.FAILED:
        print(f"Failed: {result.path}: {result.error}")
    else:
        print(
            f"{result.status.value}: {result.path} "
            f"({result.successful_chunks}/{result.total_chunks} chunks embedded)"
        )


def index_command(service: RagService, args: argparse.Namespace) -> int:
    """Index a directory; Ctrl+C stops the run between files."""
    cancel_event = threading.Event()

    def _request_cancel(signum, frame) -> None:
        print("Cancelling after the current file...", file=sys.stderr)
        cancel_event.set()

    previous_handler = signal.signal(signal.SIGINT, _request_cancel)
    try:
        report = service.index(args.directory, cancel_event=cancel_event)
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    for result in report.results:
        _print_file_result(result)
    print(
        f"Indexed: {report.indexed}, partial: {report.partially_indexed}, "
        f"skipped: {report.skipped}, failed: {report.failed}"
    )
    if report.cancelled:
        print("Run cancelled before all files were processed")
        return EXIT_ERROR
    if report.failed:
        return EXIT_ERROR
    if report.partially_indexed:
        return EXIT_PARTIAL
    return EXIT_OK


def index_file_command(service: RagService, args: argparse.Namespace) -> int:
    """Index one file."""
    try:
        result = service.index_file(args.path, force=args.force)
    except PartialIndexingError as e:
        _print_file_result(e.result)
        print("Re-run with --force to retry the missing chunks")
        return EXIT_PARTIAL
    _print_file_result(result)
    return EXIT_OK


def search_command(service: RagService, args: argparse.Namespace) -> int:
    """Run a semantic search and print the matches."""
    query = " ".join(args.query)
    results = service.search(query, top_k=args.top_k, threshold=args.threshold)
    if not results:
        print("No results above the similarity threshold")
        return EXIT_OK

    for rank, result in enumerate(results, start=1):
        preview = result.chunk.content.replace("\n", " ")
        if len(preview) > 200:
            preview = preview[:200] + "..."
        print(f"{rank}. [{result.similarity:.3f}] {result.document.path} #{result.chunk.chunk_index}")
        print(f"   {preview}")
    return EXIT_OK


def stats_command(service: RagService, args: argparse.Namespace) -> int:
    """Print index statistics."""
    stats = service.stats()
    print(f"Documents:  {stats.document_count}")
    print(f"Chunks:     {stats.chunk_count}")
    print(f"Embeddings: {stats.embedding_count}")
    if stats.missing_embeddings:
        print(
            f"Missing embeddings: {stats.missing_embeddings} "
            "(see 'ragindex list --incomplete')"
        )
    return EXIT_OK


def list_command(service: RagService, args: argparse.Namespace) -> int:
    """List indexed documents."""
    documents = service.incomplete_documents() if args.incomplete else service.list_documents()
    for summary in documents:
        marker = "" if summary.is_complete else "  (incomplete)"
        print(
            f"{summary.id}\t{summary.kind.value}\t"
            f"{summary.embedding_count}/{summary.chunk_count}\t{summary.path}{marker}"
        )
    print(f"{len(documents)} document(s)")
    return EXIT_OK


def clear_command(service: RagService, args: argparse.Namespace) -> int:
    """Delete everything from the index."""
    if not args.yes:
        answer = input("Delete all indexed documents? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            print("Aborted")
            return EXIT_OK
    service.clear()
    print("Index cleared")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="ragindex",
        description="Local document indexing and semantic search",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: {settings.log_level})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    index_parser = subparsers.add_parser("index", help="Index a directory recursively")
    index_parser.add_argument("directory", help="Directory to index")
    index_parser.set_defaults(func=index_command)

    file_parser = subparsers.add_parser("index-file", help="Index a single file")
    file_parser.add_argument("path", help="File to index")
    file_parser.add_argument(
        "--force",
        action="store_true",
        help="Delete an existing document for this path and index it again",
    )
    file_parser.set_defaults(func=index_file_command)

    search_parser = subparsers.add_parser("search", help="Semantic search")
    search_parser.add_argument("query", nargs="+", help="Query text")
    search_parser.add_argument(
        "--top-k",
        type=int,
        default=settings.search.top_k,
        help=f"Maximum results (default: {settings.search.top_k})",
    )
    search_parser.add_argument(
        "--threshold",
        type=float,
        default=settings.search.similarity_threshold,
        help=f"Minimum similarity (default: {settings.search.similarity_threshold})",
    )
    search_parser.set_defaults(func=search_command)

    stats_parser = subparsers.add_parser("stats", help="Show index statistics")
    stats_parser.set_defaults(func=stats_command)

    list_parser = subparsers.add_parser("list", help="List indexed documents")
    list_parser.add_argument(
        "--incomplete",
        action="store_true",
        help="Only documents with chunks missing an embedding",
    )
    list_parser.set_defaults(func=list_command)

    clear_parser = subparsers.add_parser("clear", help="Delete the whole index")
    clear_parser.add_argument("--yes", action="store_true", help="Do not ask for confirmation")
    clear_parser.set_defaults(func=clear_command)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.set_defaults(func=None)

    return parser


def main(
    argv: Sequence[str] | None = None,
    service_factory: Callable[[], RagService] = RagService.from_settings,
) -> int:
    """
    CLI entry point.

    Args:
        argv: Arguments without the program name (sys.argv if None)
        service_factory: Builds the RAG service for data commands

    Returns:
        int: Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_settings().log_level)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    if args.command == "serve":
        from ragindex.api.main import run

        run(host=args.host, port=args.port)
        return EXIT_OK

    try:
        with service_factory() as service:
            return args.func(service, args)
    except (RagIndexError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        logger.debug("Command failed", exc_info=e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
