from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from roster_ingest.config.loader import ConfigError, load_config, resolve_config_path
from roster_ingest.excel.reader import SpreadsheetReadError, UnsupportedFileError
from roster_ingest.logging.init import enable_debug, log_summary, setup_logging
from roster_ingest.parsing.validators import IngestError
from roster_ingest.services.batch import ProcessingError, process_all, scan_source_files
from roster_ingest.services.pipeline import ingest_file
from roster_ingest.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env (may set ROSTER_INGEST_CONFIG)
- Load and validate the YAML config
- Ingest every roster file in source_directory, write normalized CSV exports
- Print the SUMMARY line and exit with 0 (all ok), 2 (some files rejected)
  or 1 (fatal: config or directory problem)
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env via python-dotenv; existing variables win unless override."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="roster-ingest",
        description="Normalize messy teacher/role-assignment rosters into canonical CSV",
    )
    p.add_argument("--config", type=Path, default=None, help="Config file (default: config/ingest.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--inspect-data",
        action="store_true",
        help="Print detected format, header and first records per file then exit",
    )
    return p.parse_args(argv)


def _inspect_data(cfg) -> int:
    directory = Path(cfg.source_directory)
    try:
        files = scan_source_files(directory, cfg.file_types)
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    if not files:
        print("inspect: no roster files")
        return EXIT_SUCCESS_ALL
    for f in files:
        print(f"FILE: {f.name}")
        try:
            result = ingest_file(f, encoding=cfg.encoding)
        except (IngestError, SpreadsheetReadError, UnsupportedFileError) as e:
            print(f"  error={e}")
            continue
        print(
            f"  format={result.document_format.value} header_row={result.header_row_index} "
            f"header={result.header_labels}"
        )
        print(f"  records={len(result.records)} dropped_rows={result.dropped_rows} pools={result.pool_sizes}")
        print("    sample_records=", result.records[:INSPECT_SAMPLE_ROWS])
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None -> read process arguments; [] means "no arguments" (tests)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        enable_debug(logger)
        logger.debug("debug mode enabled")

    config_path = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg)

    logger.info(f"Processing files from: {directory}")
    try:
        result = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    # render_summary_line includes the label; log_summary adds it again
    summary_line = render_summary_line(result)
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
