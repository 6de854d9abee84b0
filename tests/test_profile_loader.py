import pytest

from profile_matcher.utils.profile_loader import list_profile_files, load_profiles, read_profile_lines

def test_read_profile_lines(tmp_path):
    p = tmp_path / "users.txt"
    p.write_text("  Python developer, remote.\n\n   \nFinance graduate\n", encoding="utf-8")
    assert read_profile_lines(p) == ["Python developer, remote.", "Finance graduate"]
    assert load_profiles(p) == read_profile_lines(p)

def test_list_and_load_directory(tmp_path):
    (tmp_path / "b.txt").write_text("Cloud   engineer\nwanted.\n", encoding="utf-8")
    (tmp_path / "a.TXT").write_text("Bank analyst", encoding="utf-8")
    (tmp_path / "empty.txt").write_text("\n  \n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("ignored", encoding="utf-8")
    (tmp_path / "sub.txt").mkdir()
    files = list_profile_files(tmp_path)
    assert [f.name for f in files] == ["a.TXT", "b.txt", "empty.txt"]
    assert load_profiles(tmp_path) == ["Bank analyst", "Cloud engineer wanted."]

def test_list_missing_directory(tmp_path):
    assert list_profile_files(tmp_path / "nope") == []

def test_load_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_profiles(tmp_path / "nope.txt")
