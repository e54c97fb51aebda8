from pathlib import Path

import pytest

import utils


@pytest.fixture(autouse=True)
def isolated_app_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    app_dir = tmp_path / "app_home"
    monkeypatch.setattr(utils, "APP_DIR", app_dir)
    monkeypatch.setattr(utils, "CONFIG_PATH", app_dir / "config.json")
    monkeypatch.setattr(utils, "LOG_PATH", app_dir / "app.log")
    return app_dir


@pytest.fixture
def sample_wordlist_path() -> str:
    return str(Path(__file__).resolve().parent.parent / "sample_data" / "wordlist_small.txt")
