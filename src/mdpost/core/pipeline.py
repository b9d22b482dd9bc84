"""Batch check: parse and validate every file under a path, in parallel"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from mdpost.config import Settings
from mdpost.core.errors import ParseError
from mdpost.core.models import BatchReport, FileReport
from mdpost.core.parse import discover_files, parse_file
from mdpost.core.validate import validate


logger = logging.getLogger(__name__)


def check_file(path: Path, settings: Settings) -> FileReport:
    """Parse and validate one file. Parse errors are recorded on the report, not raised."""
    try:
        doc = parse_file(path)
    except ParseError as e:
        logger.warning("Skipping %s: %s", path, e)
        return FileReport(path=str(path), error=str(e))
    except UnicodeDecodeError as e:
        logger.warning("Skipping %s: not UTF-8 text", path)
        return FileReport(path=str(path), error=f"{path}: not UTF-8 text ({e.reason})")
    except OSError as e:
        logger.warning("Skipping %s: %s", path, e.strerror or e)
        return FileReport(path=str(path), error=f"{path}: cannot read ({e.strerror or e})")

    result = validate(doc, settings.layouts, settings.title_required)
    for finding in result.findings:
        logger.debug("%s: %s", path, finding.message)
    return FileReport(path=str(path), document=doc, findings=result.findings)


def run_check(path: str | Path, settings: Settings) -> BatchReport:
    """Check every matching file under path on a thread pool; reports are ordered by path."""
    files = discover_files(Path(path), settings.extensions)
    logger.info("Checking %d file(s) under %s with %d worker(s)", len(files), path, settings.workers)
    if not files:
        return BatchReport()

    with ThreadPoolExecutor(max_workers=settings.workers) as pool:
        reports = list(pool.map(lambda p: check_file(p, settings), files))

    report = BatchReport(files=sorted(reports, key=lambda r: r.path))
    logger.info(
        "Checked %d file(s): %d parsed, %d failed, %d flagged",
        len(report.files), report.parsed, report.failed, report.flagged,
    )
    return report
