from web3_marketplace.config import DEFAULT_API_URL, Settings


def test_defaults() -> None:
    cfg = Settings(_env_file=None)
    assert cfg.api_url == DEFAULT_API_URL
    assert cfg.log_level == "INFO"


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("MARKETPLACE_API_URL", "https://indexer.test/v1/")
    monkeypatch.setenv("MARKETPLACE_DEFAULT_ACCOUNT", "0xabc")
    monkeypatch.setenv("MARKETPLACE_PROJECT_ID", "  ")
    cfg = Settings(_env_file=None)
    assert cfg.api_url == "https://indexer.test/v1"
    assert cfg.default_account == "0xabc"
    assert cfg.project_id is None


def test_validate_for_run_reports_missing_ids() -> None:
    cfg = Settings(_env_file=None, project_id=None, marketplace_id=None)
    assert cfg.validate_for_run() == [
        "MARKETPLACE_PROJECT_ID is required",
        "MARKETPLACE_ID is required",
    ]


def test_validate_for_run_passes_with_ids() -> None:
    cfg = Settings(_env_file=None, project_id="p1", marketplace_id="m1")
    assert cfg.validate_for_run() == []
