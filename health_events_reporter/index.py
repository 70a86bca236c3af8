"""
Command-line entry point for the AWS Health events report

Resolves the event window and target region, fetches events from the
Health API, prints them and writes them to a dated CSV file.
"""

import argparse
import logging
import os
import sys

from botocore.exceptions import BotoCoreError, ClientError

from health_events_reporter.aws_clients.client_manager import resolve_target_region
from health_events_reporter.aws_clients.health_client import Boto3HealthService
from health_events_reporter.models import HealthReportError
from health_events_reporter.processing.event_fetcher import fetch_health_events
from health_events_reporter.processing.report_emitter import write_report
from health_events_reporter.utils.config import (
    DEFAULT_LOOKBACK_DAYS,
    LOG_LEVEL,
    MAX_WORKERS,
)
from health_events_reporter.utils.helpers import (
    build_csv_filename,
    format_window_bound,
    resolve_time_window,
    utc_now,
)


def setup_logging(level=LOG_LEVEL):
    """Send diagnostics to stderr so they never mix with the report on stdout"""
    logging.basicConfig(
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level, logging.INFO))


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="health-events-report",
        description="Export AWS Health events for a region and time window to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES:
    # Last 10 days in the default region
    %(prog)s

    # Explicit window and region
    %(prog)s --from-utc 2024-01-01 --to-utc 2024-01-31 --region eu-west-1
        """,
    )

    parser.add_argument(
        "--from-utc",
        help=f"Start date in UTC (YYYY-MM-DD, default: {DEFAULT_LOOKBACK_DAYS} days ago)",
    )

    parser.add_argument(
        "--to-utc",
        help="End date in UTC (YYYY-MM-DD, default: now)",
    )

    parser.add_argument(
        "--region",
        help="AWS region to report on (default: region from the AWS environment)",
    )

    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for the CSV file (default: current directory)",
    )

    parser.add_argument(
        "--max-workers",
        type=int,
        default=MAX_WORKERS,
        help=f"Events looked up concurrently (default: {MAX_WORKERS})",
    )

    return parser.parse_args(argv)


def run(args, service=None, session=None, now=None, stream=None):
    """
    Resolve, fetch and emit

    Args:
        args (argparse.Namespace): Parsed arguments
        service (HealthService, optional): Health API capability
        session (boto3.session.Session, optional): Session for region lookup
        now (datetime, optional): Clock value for defaults and the file name
        stream: Console stream, stdout by default

    Returns:
        str: Path of the CSV file written
    """
    stream = stream or sys.stdout
    if now is None:
        now = utc_now()

    window = resolve_time_window(args.from_utc, args.to_utc, now=now)
    target_region = resolve_target_region(args.region, session=session)

    stream.write(
        f"Fetching AWS Health events from {format_window_bound(window.start)} "
        f"to {format_window_bound(window.end)} for region {target_region}\n"
    )

    filename = build_csv_filename(now)
    output_path = os.path.join(args.output_dir, filename)

    service = service or Boto3HealthService()
    events = fetch_health_events(
        service, window, target_region, max_workers=args.max_workers
    )

    write_report(events, output_path, stream=stream)
    stream.write(f"Events written to {filename}\n")
    return output_path


def main(argv=None, service=None, session=None, now=None):
    """
    Main entry point

    Returns:
        int: Process exit status
    """
    args = parse_arguments(argv)
    setup_logging()

    try:
        run(args, service=service, session=session, now=now)
    except KeyboardInterrupt:
        logging.warning("Process interrupted by user")
        return 1
    except HealthReportError as e:
        logging.error(f"{e}")
        return 1
    except (ClientError, BotoCoreError) as e:
        logging.error(f"AWS Health API call failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
