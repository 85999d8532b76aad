import pytest

from mdtodo import storage
from mdtodo.errors import FileIOError, InvalidItemNumber
from mdtodo.models import TodoItemState
from mdtodo.storage import get_available_lists, move_between, read_list, write_list


def test_read_list_uses_file_stem_as_name(tmp_path):
    path = tmp_path / "work.md"
    path.write_text("- [ ] one\n", encoding="utf-8")
    todo_list = read_list(str(path))
    assert todo_list.name == "work"
    assert todo_list.get_item(1).name == "one"


def test_read_missing_file_is_an_error(tmp_path):
    path = tmp_path / "nope.md"
    with pytest.raises(FileIOError) as exc:
        read_list(str(path))
    assert exc.value.not_found
    assert str(path) in str(exc.value)


def test_read_missing_file_for_add(tmp_path):
    todo_list = read_list(str(tmp_path / "new.md"), "new", missing_ok=True)
    assert todo_list.name == "new"
    assert todo_list.elements == []


def test_write_creates_directories_and_round_trips(tmp_path):
    text = "# Notes\n- [ ] one\n- [x] two\n"
    src = tmp_path / "a.md"
    src.write_text(text, encoding="utf-8")
    dest = tmp_path / "nested" / "dir" / "b.md"

    write_list(str(dest), read_list(str(src)))

    assert dest.read_text(encoding="utf-8") == text


def test_move_between_lists(tmp_path):
    a = tmp_path / "a.md"
    b = tmp_path / "b.md"
    a.write_text("- [x] done thing\n", encoding="utf-8")

    moved = move_between(str(a), str(b), [1])

    assert [i.name for i in moved] == ["done thing"]
    assert a.read_text(encoding="utf-8") == ""
    assert b.read_text(encoding="utf-8") == "- [x] done thing\n"


def test_move_appends_to_existing_destination(tmp_path):
    a = tmp_path / "a.md"
    b = tmp_path / "b.md"
    a.write_text("- [ ] one\n- [ ] two\n", encoding="utf-8")
    b.write_text("# B\n- [ ] b1\n", encoding="utf-8")

    move_between(str(a), str(b), [2])

    assert a.read_text(encoding="utf-8") == "- [ ] one\n"
    assert b.read_text(encoding="utf-8") == "# B\n- [ ] b1\n- [ ] two\n"


def test_move_duplicates_rather_than_loses_on_source_write_failure(tmp_path, monkeypatch):
    a = tmp_path / "a.md"
    b = tmp_path / "b.md"
    a.write_text("- [ ] precious\n", encoding="utf-8")

    real_write = storage.write_list

    def failing_write(path, todo_list):
        if path == str(a):
            raise FileIOError(path, PermissionError(13, "Permission denied"))
        real_write(path, todo_list)

    monkeypatch.setattr(storage, "write_list", failing_write)

    with pytest.raises(FileIOError):
        move_between(str(a), str(b), [1])

    assert a.read_text(encoding="utf-8") == "- [ ] precious\n"
    assert b.read_text(encoding="utf-8") == "- [ ] precious\n"


def test_move_invalid_number_writes_nothing(tmp_path):
    a = tmp_path / "a.md"
    b = tmp_path / "b.md"
    a.write_text("- [ ] one\n", encoding="utf-8")

    with pytest.raises(InvalidItemNumber):
        move_between(str(a), str(b), [1, 2])

    assert a.read_text(encoding="utf-8") == "- [ ] one\n"
    assert not b.exists()


def test_move_within_same_file(tmp_path):
    a = tmp_path / "a.md"
    a.write_text("- [ ] one\n- [x] two\n- [ ] three\n", encoding="utf-8")

    move_between(str(a), str(a), [1])

    assert a.read_text(encoding="utf-8") == "- [x] two\n- [ ] three\n- [ ] one\n"


def test_move_from_missing_source_fails(tmp_path):
    with pytest.raises(FileIOError):
        move_between(str(tmp_path / "missing.md"), str(tmp_path / "b.md"), [1])


def test_get_available_lists(tmp_path):
    (tmp_path / "work.md").write_text("", encoding="utf-8")
    (tmp_path / "home.md").write_text("", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    (tmp_path / "sub.md").mkdir()
    assert get_available_lists(str(tmp_path)) == ["home", "work"]
    assert get_available_lists(str(tmp_path / "missing")) == []


def test_state_survives_move(tmp_path):
    a = tmp_path / "a.md"
    b = tmp_path / "b.md"
    a.write_text("- [x] one\n- [ ] two\n", encoding="utf-8")
    move_between(str(a), str(b), [1, 2])
    states = [i.state for i in read_list(str(b)).items]
    assert states == [TodoItemState.DONE, TodoItemState.INITIAL]


def test_read_non_utf8_file_is_an_error(tmp_path):
    path = tmp_path / "latin1.md"
    path.write_bytes(b"- [ ] caf\xe9\n")
    with pytest.raises(FileIOError) as exc:
        read_list(str(path))
    assert not exc.value.not_found
    assert str(path) in str(exc.value)
    assert "UTF-8" in str(exc.value)
