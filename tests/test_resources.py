from pathlib import Path

import pytest

from spacerocks.resources import find_resource_dir, search_and_set_resource_dir


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def test_working_directory_is_checked_first(tmp_path, workdir):
    (workdir / "resources").mkdir()
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    assert find_resource_dir("resources", app) == (workdir / "resources").resolve()


def test_found_in_application_directory(tmp_path, workdir):
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    assert find_resource_dir("resources", app) == (app / "resources").resolve()


@pytest.mark.parametrize("levels", [1, 2, 3])
def test_found_above_application_directory(tmp_path, workdir, levels):
    top = tmp_path / "top"
    app = top.joinpath(*[f"d{i}" for i in range(levels)])
    app.mkdir(parents=True)
    (top / "resources").mkdir()
    assert find_resource_dir("resources", app) == (top / "resources").resolve()


def test_four_levels_up_is_not_searched(tmp_path, workdir):
    top = tmp_path / "top"
    app = top / "a" / "b" / "c" / "d"
    app.mkdir(parents=True)
    (top / "resources").mkdir()
    assert find_resource_dir("resources", app) is None


def test_a_file_is_not_a_directory(tmp_path, workdir):
    (workdir / "resources").write_text("data")
    app = tmp_path / "app"
    app.mkdir()
    assert find_resource_dir("resources", app) is None


def test_search_changes_working_directory(tmp_path, workdir):
    app = tmp_path / "app"
    (app / "resources").mkdir(parents=True)
    assert search_and_set_resource_dir("resources", app) is True
    assert Path.cwd() == (app / "resources").resolve()


def test_search_without_match_leaves_working_directory(tmp_path, workdir):
    app = tmp_path / "app"
    app.mkdir()
    assert search_and_set_resource_dir("resources", app) is False
    assert Path.cwd() == workdir.resolve()