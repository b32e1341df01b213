import sys
from pathlib import Path
from typing import Callable

import pytest

# Ensure local source package (src/httpforge) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from httpforge._config import Config  # noqa: E402


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str | bytes], str]:
    """Write content to a fresh temporary file and return its path."""
    counter = iter(range(1_000_000))

    def _write(content: str | bytes) -> str:
        path = tmp_path / f"httpforge-test-{next(counter)}"
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "HTTPFORGE_USER_AGENT",
        "HTTPFORGE_TIMEOUT",
        "HTTPFORGE_FOLLOW_REDIRECTS",
        "HTTPFORGE_VERIFY_SSL",
        "HTTPFORGE_MAX_RETRIES",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> Config:
    return Config(max_retries=0, timeout=5.0)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
