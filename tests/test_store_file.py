from pathlib import Path

import pytest

from pastebox.paste import Paste, PasteType, store_file

PNG_HEADER = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _file(data: bytes) -> Paste:
    return Paste(data=data, type=PasteType.file)


@pytest.mark.parametrize(
    "requested, expected",
    [
        ("report.csv", "report.csv"),
        ("nested/dir/report.csv", "report.csv"),
        ("/abs/path/test.file", "test.file"),
        ("..\\windows\\notes.md", "notes.md"),
    ],
)
def test_explicit_extension_is_kept_without_random_names(upload_root: Path, make_policy, requested, expected):
    name = store_file(_file(b"a,b\n"), requested, make_policy(), upload_root)
    assert name == expected
    assert (upload_root / expected).read_bytes() == b"a,b\n"


def test_dash_is_stored_as_stdin(upload_root: Path, make_policy):
    name = store_file(_file(b"hello"), "-", make_policy(default_extension="txt"), upload_root)
    assert name == "stdin.txt"


@pytest.mark.parametrize("requested", [None, "", "..", "/"])
def test_unusable_names_fall_back_to_file(upload_root: Path, make_policy, requested):
    name = store_file(_file(b"xyz"), requested, make_policy(default_extension="bin"), upload_root)
    assert name == "file.bin"


def test_default_extension_when_content_is_unknown(upload_root: Path, make_policy):
    data = bytes([120, 121, 122])
    name = store_file(_file(data), "random", make_policy(default_extension="bin"), upload_root)
    assert name == "random.bin"
    assert (upload_root / name).read_bytes() == data


def test_extension_is_sniffed_from_content(upload_root: Path, make_policy):
    name = store_file(_file(PNG_HEADER), "image", make_policy(default_extension="bin"), upload_root)
    assert name == "image.png"


def test_sniffing_is_skipped_when_an_extension_is_given(upload_root: Path, make_policy):
    name = store_file(_file(PNG_HEADER), "image.dat", make_policy(), upload_root)
    assert name == "image.dat"


def test_random_name_keeps_original_extension(upload_root: Path, make_policy):
    policy = make_policy("xyz")
    name = store_file(_file(b"ABC"), "test.txt", policy, upload_root)
    assert name == "xyz.txt"
    assert (upload_root / "xyz.txt").read_text() == "ABC"
    assert not (upload_root / "test.txt").exists()


def test_random_name_without_extension_still_gets_one(upload_root: Path, make_policy):
    name = store_file(_file(b"xyz"), "random", make_policy("abc123", default_extension="bin"), upload_root)
    assert name == "abc123.bin"


def test_random_name_replaces_stdin(upload_root: Path, make_policy):
    name = store_file(_file(PNG_HEADER), "-", make_policy("calm-otter"), upload_root)
    assert name == "calm-otter.png"


def test_empty_generated_name_is_ignored(upload_root: Path, make_policy):
    name = store_file(_file(b"data"), "keep.log", make_policy(""), upload_root)
    assert name == "keep.log"


def test_dotfile_counts_as_extensionless(upload_root: Path, make_policy):
    name = store_file(_file(b"set -e"), ".bashrc", make_policy(default_extension="txt"), upload_root)
    assert name == ".bashrc.txt"


def test_existing_file_is_truncated(upload_root: Path, make_policy):
    (upload_root / "same.txt").write_bytes(b"a much longer previous payload")
    store_file(_file(b"short"), "same.txt", make_policy(), upload_root)
    assert (upload_root / "same.txt").read_bytes() == b"short"


def test_generator_is_consulted_once_per_store(upload_root: Path, make_policy):
    policy = make_policy("one", "two")
    assert store_file(_file(b"1"), "a.txt", policy, upload_root) == "one.txt"
    assert store_file(_file(b"2"), "b.txt", policy, upload_root) == "two.txt"
    assert policy.generator.calls == 2


def test_write_failure_propagates(tmp_path: Path, make_policy):
    missing_root = tmp_path / "does-not-exist"
    with pytest.raises(OSError):
        store_file(_file(b"data"), "a.txt", make_policy(), missing_root)


@pytest.mark.parametrize("data", [b"", b"\x00\x01\x02", "ünïcödé".encode("utf-8"), bytes(range(256)) * 4])
def test_written_bytes_round_trip(upload_root: Path, make_policy, data):
    name = store_file(_file(data), "blob", make_policy(default_extension="bin"), upload_root)
    assert (upload_root / name).read_bytes() == data


@pytest.mark.parametrize("requested", ["notes.", "a..", "...", "v1.2."])
def test_trailing_dot_counts_as_an_empty_extension(upload_root: Path, make_policy, requested):
    name = store_file(_file(PNG_HEADER), requested, make_policy(default_extension="bin"), upload_root)
    assert name == requested


def test_trailing_dot_with_random_name_drops_the_dot(upload_root: Path, make_policy):
    name = store_file(_file(b"data"), "notes.", make_policy("xyz"), upload_root)
    assert name == "xyz"
    assert (upload_root / "xyz").read_bytes() == b"data"


def test_empty_paste_is_truthy():
    assert _file(b"")
