"""
Command line entry point: fetch and unpack the prebuilt API archive.
"""

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from .config import get_settings
from .core.exceptions import ArtefactError
from .core.matching import PatternMatchingPolicy
from .logging_setup import setup_logging
from .models.build import BuildConfig
from .pipeline import ArtefactPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artefact-sources",
        description="Download and extract the prebuilt API archive for a commit",
    )
    parser.add_argument("--platform", required=True, help="Platform label")
    parser.add_argument(
        "--pattern", required=True, help="Regex the archive name must match"
    )
    parser.add_argument(
        "--prefer",
        action="append",
        default=[],
        help="Preferred name substring, may be repeated (earliest wins)",
    )
    parser.add_argument("--dest", required=True, help="Destination folder")
    parser.add_argument(
        "--source-url",
        action="append",
        dest="source_urls",
        help="Source URL, may be repeated (default: SOURCE_URLS)",
    )
    parser.add_argument("--branch", help="API branch (default: API_BRANCH)")
    parser.add_argument("--commit", help="API commit hash (default: API_COMMIT_HASH)")
    parser.add_argument(
        "--keep-archive",
        action="store_true",
        help="Keep the downloaded archive after extraction",
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    settings = get_settings()

    try:
        build_config = BuildConfig(
            source_urls=args.source_urls or settings.source_urls,
            branch=settings.api_branch if args.branch is None else args.branch,
            api_commit_hash=args.commit or settings.api_commit_hash,
        )
    except ValidationError as e:
        logger.error(f"Invalid build configuration: {e}")
        return 2

    pipeline = ArtefactPipeline(
        build_config,
        PatternMatchingPolicy(args.pattern, args.prefer),
        platform=args.platform,
        destination=args.dest,
        cleanup_archive=False if args.keep_archive else None,
    )

    try:
        asyncio.run(pipeline.run())
    except ArtefactError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
