"""
End-to-end tests for the command-line entry point
"""

import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from botocore.exceptions import ClientError, NoCredentialsError

from health_events_reporter.index import main, parse_arguments
from health_events_reporter.testing import FakeHealthService

NOW = datetime(2024, 1, 3, 9, 15, tzinfo=timezone.utc)


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_single_outage_end_to_end(tmp_path, capsys, outage_service):
    exit_code = main(
        ["--from-utc", "2023-12-31", "--to-utc", "2024-01-02", "--region", "us-east-1",
         "--output-dir", str(tmp_path)],
        service=outage_service,
        now=NOW,
    )

    assert exit_code == 0
    assert read_lines(tmp_path / "20240103_health.csv") == [
        "Timestamp,ARN,Detail,Affected Entities",
        '2024-01-01T00:00:00Z,arn:1,Outage,"res-1, res-2"',
    ]

    out = capsys.readouterr().out
    assert out.startswith(
        "Fetching AWS Health events from 2023-12-31 00:00:00 UTC "
        "to 2024-01-02 00:00:00 UTC for region us-east-1\n"
    )
    assert "Affected Entities:\n- res-1\n- res-2\n" in out
    assert out.endswith("Events written to 20240103_health.csv\n")


def test_window_passed_to_listing(tmp_path, outage_service):
    main(
        ["--from-utc", "2023-12-31", "--to-utc", "2024-01-02", "--region", "eu-west-1",
         "--output-dir", str(tmp_path)],
        service=outage_service,
        now=NOW,
    )

    _, window, region = outage_service.calls[0]
    assert window.start == datetime(2023, 12, 31, tzinfo=timezone.utc)
    assert window.end == datetime(2024, 1, 2, tzinfo=timezone.utc)
    assert region == "eu-west-1"


def test_malformed_from_utc_warns_and_uses_default(tmp_path, caplog, outage_service):
    with caplog.at_level(logging.WARNING):
        exit_code = main(
            ["--from-utc", "not-a-date", "--region", "us-east-1", "--output-dir", str(tmp_path)],
            service=outage_service,
            now=NOW,
        )

    assert exit_code == 0
    assert "Could not parse date 'not-a-date'" in caplog.text
    _, window, _ = outage_service.calls[0]
    assert window.start == NOW - timedelta(days=10)
    assert window.end == NOW


def test_zero_events_writes_header_only(tmp_path):
    exit_code = main(
        ["--region", "us-east-1", "--output-dir", str(tmp_path)],
        service=FakeHealthService(),
        now=NOW,
    )

    assert exit_code == 0
    assert read_lines(tmp_path / "20240103_health.csv") == [
        "Timestamp,ARN,Detail,Affected Entities"
    ]


def test_default_region_from_session(tmp_path, outage_service):
    session = MagicMock()
    session.region_name = "sa-east-1"

    main(["--output-dir", str(tmp_path)], service=outage_service, session=session, now=NOW)

    assert outage_service.calls[0][2] == "sa-east-1"


def test_unresolved_region_exits_non_zero(tmp_path, monkeypatch, caplog, outage_service):
    monkeypatch.delenv("AWS_REGION", raising=False)
    session = MagicMock()
    session.region_name = None

    exit_code = main(["--output-dir", str(tmp_path)], service=outage_service, session=session, now=NOW)

    assert exit_code == 1
    assert "no default region" in caplog.text
    assert outage_service.calls == []


def test_api_failure_exits_non_zero(tmp_path, caplog):
    service = MagicMock()
    service.list_events.side_effect = ClientError(
        {"Error": {"Code": "AccessDeniedException", "Message": "denied"}}, "DescribeEvents"
    )

    exit_code = main(["--region", "us-east-1", "--output-dir", str(tmp_path)], service=service, now=NOW)

    assert exit_code == 1
    assert "AccessDeniedException" in caplog.text
    assert not (tmp_path / "20240103_health.csv").exists()


def test_missing_credentials_exits_non_zero(tmp_path):
    service = MagicMock()
    service.list_events.side_effect = NoCredentialsError()

    exit_code = main(["--region", "us-east-1", "--output-dir", str(tmp_path)], service=service, now=NOW)

    assert exit_code == 1


def test_argument_defaults():
    args = parse_arguments([])

    assert args.from_utc is None
    assert args.to_utc is None
    assert args.region is None
    assert args.output_dir == "."
    assert args.max_workers == 1
