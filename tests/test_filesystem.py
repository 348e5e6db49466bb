import pytest

from dragonforge.filesystem import FileSystem


@pytest.fixture
def fs(tmp_path):
    return FileSystem(str(tmp_path) + "/")


def test_backslashes_normalised():
    fs = FileSystem()
    fs.set_game_directory("C:\\games\\df\\")
    assert fs.game_directory == "C:/games/df/"


def test_write_then_read_all_round_trip(fs):
    assert fs.write("notes.txt", "one\ntwo\n")
    assert fs.read_all("notes.txt", "|") == "one|two|"


def test_append_mode(fs):
    fs.write("log.txt", "a\n")
    fs.write("log.txt", "b\n", append=True)
    assert fs.read_all("log.txt", "\n") == "a\nb\n"


def test_overwrite_mode(fs):
    fs.write("log.txt", "first\n")
    fs.write("log.txt", "second\n")
    assert fs.read_all("log.txt") == "second"


def test_read_content_skips_empty_lines(fs):
    fs.write("shader.glsl", "x\n\n\ny\n")
    assert fs.read_content("shader.glsl", "\n") == "x\ny\n"
    assert fs.read_all("shader.glsl", "\n") == "x\n\n\ny\n"


def test_missing_file_reads_empty(fs):
    assert fs.read_all("missing.txt") == ""
    assert fs.read_content("missing.txt") == ""


def test_get_path_searches_default_folders(fs, tmp_path):
    (tmp_path / "data" / "models").mkdir(parents=True)
    (tmp_path / "data" / "models" / "cube.obj").write_text("v")
    assert fs.get_path("cube.obj") == fs.game_directory + "data/models/cube.obj"
    assert fs.exists("cube.obj")


def test_get_path_prefers_direct_path(fs, tmp_path):
    (tmp_path / "a.txt").write_text("x")
    assert fs.get_path("a.txt") == fs.game_directory + "a.txt"


def test_get_path_custom_folders(fs, tmp_path):
    (tmp_path / "custom").mkdir()
    (tmp_path / "custom" / "f.txt").write_text("x")
    assert fs.get_path("f.txt", ["custom/"]) == fs.game_directory + "custom/f.txt"
    assert fs.get_path("f.txt") == "f.txt"


def test_missing_path_returned_unchanged(fs):
    assert fs.get_path("nothing.bin") == "nothing.bin"
    assert not fs.exists("nothing.bin")


def test_remove(fs, tmp_path):
    fs.write("gone.txt", "x")
    assert fs.remove("gone.txt")
    assert not (tmp_path / "gone.txt").exists()
    assert not fs.remove("gone.txt")


def test_write_into_missing_directory_fails(fs):
    assert fs.write("no/such/dir/file.txt", "x") is False


def test_open_missing_raises(fs):
    with pytest.raises(FileNotFoundError):
        fs.open("missing.txt")