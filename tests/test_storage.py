import pytest

from product_csv.storage import FileStorage, MemoryStorage


def test_file_storage_preserves_newlines(tmp_path):
    path = str(tmp_path / "f.csv")
    fs = FileStorage()
    fs.append_text(path, "a,b,c\n")
    fs.append_text(path, "d,e,f\r\n")
    assert fs.read_text(path) == "a,b,c\nd,e,f\r\n"
    fs.write_text(path, "x")
    assert fs.read_text(path) == "x"


def test_file_storage_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileStorage().read_text(str(tmp_path / "missing.csv"))


def test_memory_storage_contract():
    ms = MemoryStorage()
    with pytest.raises(FileNotFoundError):
        ms.read_text("p")
    ms.append_text("p", "a\n")
    ms.append_text("p", "b\n")
    assert ms.read_text("p") == "a\nb\n"
    ms.write_text("p", "")
    assert ms.files == {"p": ""}
