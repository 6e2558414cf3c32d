import logging
import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'lingssg'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from lingssg.core.linguinput import Table
from lingssg.data import clear_caches


@pytest.fixture(autouse=True)
def _reset_lingssg_state(monkeypatch: pytest.MonkeyPatch):
    """Start every test with a fresh code table and no LINGSSG_* overrides."""
    for key in list(os.environ):
        if key.startswith("LINGSSG_"):
            monkeypatch.delenv(key, raising=False)
    Table._instance = None
    clear_caches()
    yield
    Table._instance = None
    clear_caches()
    cli_logger = logging.getLogger("lingssg")
    for handler in list(cli_logger.handlers):
        cli_logger.removeHandler(handler)
    cli_logger.setLevel(logging.NOTSET)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A minimal site project: one layout, an index page and an asset."""
    root = tmp_path / "site"
    (root / "templates").mkdir(parents=True)
    (root / "pages").mkdir()
    (root / "assets" / "css").mkdir(parents=True)
    (root / "templates" / "default.html").write_text(
        "<title>{% block title %}{% endblock title %}</title>"
        "<main>{% block content %}{% endblock content %}</main>",
        encoding="utf-8",
    )
    (root / "pages" / "index.md").write_text(
        "title: Home\n+++\nHello {{ transc(in=\"h{e}l.o\", ty=Phonemic) }}\n",
        encoding="utf-8",
    )
    (root / "assets" / "css" / "site.css").write_text("body { margin: 0 }\n", encoding="utf-8")
    return root
