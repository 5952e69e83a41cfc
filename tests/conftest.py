import pytest

from xord.orderings.explicit import UnrankedPosition, explicit


@pytest.fixture
def make_ordering():
    def _factory(values=("b", "a", "c"), unknowns=None):
        ordering = explicit(list(values))
        if unknowns == UnrankedPosition.first:
            return ordering.unknowns_first()
        elif unknowns == UnrankedPosition.last:
            return ordering.unknowns_last()
        return ordering
    return _factory


@pytest.fixture
def make_order_file(tmp_path):
    def _factory(values=("b", "a", "c"), name="order.txt"):
        path = tmp_path / name
        path.write_text("".join(f"{v}\n" for v in values), encoding="utf-8")
        return path
    return _factory


@pytest.fixture(autouse=True)
def clean_xord_env(monkeypatch):
    # variables loaded from .env files during a test are removed afterwards
    for name in ("XORD_UNKNOWNS", "XORD_SKIP_BLANK"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
