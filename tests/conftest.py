import pytest

from speller import SpellCorrector
from speller.config import get_settings

CORPUS = """
The quick brown fox. The lazy dog, the end.
This is the spelling corpus; this line and that line.
"""


@pytest.fixture
def counts():
    return {"the": 100, "this": 50, "that": 30}


@pytest.fixture
def corrector(counts):
    return SpellCorrector(counts)


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "big.txt"
    path.write_text(CORPUS, encoding="utf-8")
    return path


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """No SPELLER_* variables and no stray .env file."""
    for name in ("CORPUS_PATH", "ALPHABET", "TOKEN_PATTERN", "ENCODING", "LOG_LEVEL"):
        monkeypatch.delenv(f"SPELLER_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
