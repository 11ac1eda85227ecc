from __future__ import annotations

from datetime import datetime, timedelta, timezone

from quote_snapshots import cli


def test_default_time_tag_is_utc_iso_seconds() -> None:
    moment = datetime(2024, 1, 1, 4, 0, 0, 123456, tzinfo=timezone(timedelta(hours=4)))
    assert cli.default_time_tag(moment) == "2024-01-01T00:00:00Z"


def test_main_builds_collector_from_args(monkeypatch, capsys) -> None:
    created: list[dict[str, object]] = []

    class RecordingCollector:
        def __init__(self, **kwargs: object) -> None:
            created.append(kwargs)

        async def collect_and_save(self) -> None:
            created[-1]["ran"] = True

    monkeypatch.setattr(cli, "QuoteSnapshotCollector", RecordingCollector)
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)
    cli.main(["--symbol", "AAPL", "--symbol", "MSFT", "--time-tag", "t1", "--output", "out.json", "--api-key", "k"])

    assert created == [
        {
            "api_key": "k",
            "stock_symbols": ["AAPL", "MSFT"],
            "time_tag": "t1",
            "data_file_path": "out.json",
            "ran": True,
        }
    ]
    assert capsys.readouterr().out.strip() == "Saved quotes for t1 to out.json"


def test_main_falls_back_to_settings(monkeypatch) -> None:
    created: list[dict[str, object]] = []

    class RecordingCollector:
        def __init__(self, **kwargs: object) -> None:
            created.append(kwargs)

        async def collect_and_save(self) -> None:
            return None

    monkeypatch.setenv("STOCK_SYMBOLS", "IBM")
    monkeypatch.setenv("DATA_FILE_PATH", "archive.json")
    monkeypatch.setattr(cli, "QuoteSnapshotCollector", RecordingCollector)
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)
    cli.main([])

    assert created[0]["stock_symbols"] == ["IBM"]
    assert created[0]["data_file_path"] == "archive.json"
    assert created[0]["api_key"] == "demo"
    assert str(created[0]["time_tag"]).endswith("Z")
