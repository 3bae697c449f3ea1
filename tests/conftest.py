import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _clean_sccgraph_env(monkeypatch):
    monkeypatch.delenv("SCCGRAPH_TRAVERSAL", raising=False)
    monkeypatch.delenv("SCCGRAPH_RECURSION_HEADROOM", raising=False)


@pytest.fixture(params=["iterative", "recursive"])
def strategy(request):
    return request.param
