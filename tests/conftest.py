import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))



@pytest.fixture
def target(tmp_path: Path) -> Path:
    """Fixture file path inside a fresh temp dir (not created yet)."""
    return tmp_path / ".data"


@pytest.fixture
def chunks():
    """Split fixture text into chunks of 2 * block_size hex chars."""
    def _split(text: str, block_size: int) -> list[str]:
        width = 2 * block_size
        return [text[i:i + width] for i in range(0, len(text), width)]
    return _split


@pytest.fixture
def run_cli(monkeypatch):
    """Run cli.main() with sys.argv patched; returns the SystemExit code."""
    from blob_fixture.cli import main as cli_main

    def _run(*argv: str) -> int:
        monkeypatch.setattr(sys, "argv", ["blob-fixture", *argv])
        with pytest.raises(SystemExit) as exc:
            cli_main()
        return exc.value.code
    return _run
