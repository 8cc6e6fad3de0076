import logging
import os
import shutil
import stat
from pathlib import Path

import pytest

from firebase_deploy.logging.logger import LOGGER_NAME

ROOT_DIR = Path(__file__).resolve().parents[1]
FIXTURES_DIR = ROOT_DIR / "fixtures"


class FakeFirebase:
    """Fausse CLI `firebase` : chaque appel est journalisé dans `log_file`."""

    def __init__(self, bin_dir: Path, log_file: Path) -> None:
        self.log_file = log_file
        self.env = {
            "PATH": f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}",
            "FAKE_FIREBASE_LOG": str(log_file),
            "FIREBASE_TOKEN": "inherited-token",
            "DEBUG": "inherited",
        }

    def fail_on(self, subcommand: str) -> None:
        self.env["FAKE_FIREBASE_FAIL_ON"] = subcommand

    def calls(self):
        if not self.log_file.exists():
            return []
        calls = []
        for line in self.log_file.read_text(encoding="utf-8").splitlines():
            key, _, value = line.partition("=")
            if key == "args":
                calls.append({})
            calls[-1][key] = value
        return calls


@pytest.fixture
def drone_payload() -> str:
    return (FIXTURES_DIR / "payloads" / "drone_full.json").read_text(encoding="utf-8")


@pytest.fixture
def fake_firebase(tmp_path) -> FakeFirebase:
    if shutil.which("sh") is None:
        pytest.skip("sh requis pour la fausse CLI firebase")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    binary = bin_dir / "firebase"
    shutil.copy(FIXTURES_DIR / "fake_firebase.sh", binary)
    binary.chmod(binary.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    return FakeFirebase(bin_dir, tmp_path / "calls.log")


@pytest.fixture(autouse=True)
def reset_plugin_logger():
    yield
    plugin_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(plugin_logger.handlers):
        plugin_logger.removeHandler(handler)
        handler.close()
