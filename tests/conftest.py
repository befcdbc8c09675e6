import pytest


@pytest.fixture
def catalog(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text("", encoding="utf-8")
    return str(path)


def read(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as fh:
        return fh.read()
