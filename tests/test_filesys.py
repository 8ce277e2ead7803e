import io

import pytest

from labstructs.filesys import (
    MAP_SECTOR,
    DIRECTORY_SECTOR,
    SECTOR_SIZE,
    USED,
    DirEntry,
    Disk,
    DiskError,
    comma_separate,
    main,
)

IMAGE_SECTORS = 300


def make_image(files=(), used=()):
    """Build an image holding ``files`` as (name, kind, start, count, text)."""
    image = bytearray(SECTOR_SIZE * IMAGE_SECTORS)
    map_base = SECTOR_SIZE * MAP_SECTOR
    dir_base = SECTOR_SIZE * DIRECTORY_SECTOR
    for sector in used:
        image[map_base + sector] = USED
    for index, (name, kind, start, count, text) in enumerate(files):
        base = dir_base + 16 * index
        image[base : base + 8] = name.encode("latin-1").ljust(8, b"\0")
        image[base + 8] = ord(kind)
        image[base + 9] = start
        image[base + 10] = count
        data = text.encode("latin-1")
        image[SECTOR_SIZE * start : SECTOR_SIZE * start + len(data)] = data
        for sector in range(start, start + count):
            image[map_base + sector] = USED
    return image


def sample_disk():
    return Disk(
        make_image(
            [
                ("hello", "t", 5, 1, "hello world\n"),
                ("prog", "x", 6, 2, "binary"),
            ],
            used=range(0, 5),
        )
    )


def test_short_image_is_rejected():
    with pytest.raises(DiskError):
        Disk(bytes(SECTOR_SIZE * DIRECTORY_SECTOR))


def test_entries_are_parsed():
    entries = sample_disk().entries()
    assert [e.name for e in entries] == ["hello", "prog"]
    assert entries[0] == DirEntry(0, "hello", "t", 5, 1)
    assert entries[1].is_executable
    assert entries[1].filename == "prog.x"


def test_empty_disk_listing_reports_all_space_free():
    listing = Disk(make_image()).list_files()
    assert "Space Used (bytes): 0" in listing
    assert "Space Remaining (bytes): 261,632" in listing


def test_listing_names_files_and_counts_sectors():
    listing = sample_disk().list_files()
    assert "hello.t prog.x " in listing
    assert f"Space Used (bytes): {comma_separate(3 * SECTOR_SIZE)}" in listing


def test_read_file_returns_text():
    assert sample_disk().read_file("hello") == "hello world\n"


def test_read_executable_is_refused():
    with pytest.raises(DiskError, match="executable"):
        sample_disk().read_file("prog")


def test_read_missing_file_is_refused():
    with pytest.raises(DiskError, match="does not exist"):
        sample_disk().find_printable("nothing")


def test_read_name_too_long_is_refused():
    with pytest.raises(DiskError, match="maximum length"):
        sample_disk().find_printable("muchtoolong")


def test_make_then_read_round_trip():
    disk = sample_disk()
    entry = disk.make_file("notes", "some notes\n")
    assert entry.kind == "t"
    assert entry.count == 1
    assert entry.start not in (5, 6, 7)
    assert disk.read_file("notes") == "some notes\n"
    assert [e.name for e in disk.entries()] == ["hello", "prog", "notes"]
    assert disk.image[SECTOR_SIZE * MAP_SECTOR + entry.start] == USED


def test_make_takes_first_free_sector():
    disk = Disk(make_image(used=range(0, 3)))
    assert disk.make_file("a", "x").start == 3


def test_make_truncates_long_name():
    disk = Disk(make_image())
    entry = disk.make_file("abcdefghijk", "text")
    assert entry.name == "abcdefgh"
    assert disk.read_file("abcdefgh") == "text"


def test_make_duplicate_is_refused():
    with pytest.raises(DiskError, match="already exists"):
        sample_disk().make_file("hello", "again")


def test_make_empty_name_is_refused():
    with pytest.raises(DiskError):
        Disk(make_image()).make_file("", "text")


def test_make_with_full_map_is_refused():
    disk = Disk(make_image(used=range(256)))
    with pytest.raises(DiskError, match="free sectors"):
        disk.make_file("new", "text")
    assert disk.entries() == []


def test_make_with_full_directory_is_refused():
    disk = Disk(make_image())
    for index in range(32):
        disk.make_file(f"f{index}", "x")
    with pytest.raises(DiskError, match="no free directory entry"):
        disk.make_file("extra", "x")


def test_text_is_cut_to_one_sector():
    disk = Disk(make_image())
    disk.make_file("big", "a" * 2000)
    assert len(disk.read_file("big")) == SECTOR_SIZE - 1


def test_delete_frees_entry_and_sectors():
    disk = Disk(make_image())
    first = disk.make_file("one", "1")
    removed = disk.delete_file("one")
    assert removed.start == first.start
    assert disk.entries() == []
    assert disk.image[SECTOR_SIZE * MAP_SECTOR + first.start] == 0
    assert disk.make_file("two", "2").start == first.start


def test_delete_missing_file_is_refused():
    with pytest.raises(DiskError, match="does not exist"):
        sample_disk().delete_file("ghost")


def test_save_and_open_round_trip(tmp_path):
    path = tmp_path / "disk.img"
    disk = sample_disk()
    disk.make_file("saved", "kept\n")
    disk.save(str(path))
    reopened = Disk.open(str(path))
    assert reopened.image == disk.image
    assert reopened.read_file("saved") == "kept\n"


def test_open_missing_image_raises(tmp_path):
    with pytest.raises(DiskError, match="not found"):
        Disk.open(str(tmp_path / "absent.img"))


@pytest.mark.parametrize(
    "n, expected",
    [(261632, "261,632"), (999, "999"), (0, "0"), (1234567, "1,234,567")],
)
def test_comma_separate(n, expected):
    assert comma_separate(n) == expected


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "floppya.img"
    path.write_bytes(
        bytes(make_image([("hello", "t", 5, 1, "hello world\n")], used=range(5)))
    )
    return path


def test_main_lists_files(image_path, capsys):
    assert main(["L", "--image", str(image_path)]) == 0
    assert "hello.t " in capsys.readouterr().out


def test_main_prints_file(image_path, capsys):
    assert main(["P", "hello", "--image", str(image_path)]) == 0
    out = capsys.readouterr().out
    assert "file 'hello' was found" in out
    assert out.endswith("hello world\n")


def test_main_print_missing_file_fails(image_path, capsys):
    assert main(["p", "nope", "--image", str(image_path)]) == 1
    assert "does not exist" in capsys.readouterr().out


def test_main_rejects_unknown_command(image_path, capsys):
    assert main(["Z", "--image", str(image_path)]) == 1
    assert "'Z' is not one of the four available commands" in capsys.readouterr().out


def test_main_requires_filename(image_path, capsys):
    assert main(["D", "--image", str(image_path)]) == 1
    assert "delete operation" in capsys.readouterr().out


def test_main_makes_and_deletes(image_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("typed text\n"))
    assert main(["M", "memo", "--image", str(image_path)]) == 0
    assert Disk.open(str(image_path)).read_file("memo") == "typed text\n"
    assert main(["d", "memo", "--image", str(image_path)]) == 0
    assert "'memo' has been successfully deleted" in capsys.readouterr().out
    with pytest.raises(DiskError):
        Disk.open(str(image_path)).read_file("memo")


def test_main_missing_image(tmp_path, capsys):
    assert main(["L", "--image", str(tmp_path / "none.img")]) == 0
    assert "not found" in capsys.readouterr().out