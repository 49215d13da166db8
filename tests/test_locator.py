# tests/test_locator.py
from pmdetect.locator import find_up, locate


class TestFindUp:
    def test_finds_in_start_dir(self, tmp_path, write):
        lock = write(tmp_path / "yarn.lock")
        assert find_up(["yarn.lock"], tmp_path) == lock

    def test_finds_in_ancestor(self, tmp_path, write):
        lock = write(tmp_path / "pnpm-lock.yaml")
        nested = tmp_path / "packages" / "app" / "src"
        nested.mkdir(parents=True)
        assert find_up(["pnpm-lock.yaml"], nested) == lock

    def test_nearest_wins(self, tmp_path, write):
        write(tmp_path / "yarn.lock")
        inner = write(tmp_path / "sub" / "yarn.lock")
        assert find_up(["yarn.lock"], tmp_path / "sub") == inner

    def test_name_order_breaks_ties(self, tmp_path, write):
        write(tmp_path / "yarn.lock")
        pnpm = write(tmp_path / "pnpm-lock.yaml")
        assert find_up(["pnpm-lock.yaml", "yarn.lock"], tmp_path) == pnpm

    def test_ignores_directories(self, tmp_path):
        (tmp_path / "yarn.lock").mkdir()
        assert find_up(["yarn.lock"], tmp_path) is None

    def test_not_found(self, tmp_path):
        assert find_up(["definitely-not-here.lock"], tmp_path) is None

    def test_parent_segments_are_collapsed(self, tmp_path, write):
        write(tmp_path / "proj" / "sub" / "yarn.lock")
        start = tmp_path / "proj" / "sub" / ".."
        assert find_up(["yarn.lock"], start) is None

    def test_parent_segments_still_find_ancestors(self, tmp_path, write):
        lock = write(tmp_path / "yarn.lock")
        write(tmp_path / "proj" / "sub" / "pnpm-lock.yaml")
        start = tmp_path / "proj" / "sub" / ".."
        assert find_up(["pnpm-lock.yaml", "yarn.lock"], start) == lock


class TestLocate:
    def test_manifest_next_to_lockfile(self, tmp_path, write):
        lock = write(tmp_path / "package-lock.json", "{}")
        location = locate(tmp_path)
        assert location.lockfile == lock
        # Not required to exist
        assert location.manifest == tmp_path / "package.json"
        assert not location.manifest.exists()

    def test_lockfile_dir_manifest_beats_nearer_manifest(self, tmp_path, write):
        write(tmp_path / "yarn.lock")
        write(tmp_path / "app" / "package.json", {"name": "app"})
        location = locate(tmp_path / "app")
        assert location.manifest == tmp_path / "package.json"

    def test_table_order_for_coexisting_lockfiles(self, tmp_path, write):
        write(tmp_path / "package-lock.json")
        write(tmp_path / "yarn.lock")
        write(tmp_path / "bun.lockb")
        assert locate(tmp_path).lockfile.name == "bun.lockb"

    def test_manifest_searched_without_lockfile(self, tmp_path, write):
        manifest = write(tmp_path / "package.json", {"name": "root"})
        nested = tmp_path / "src"
        nested.mkdir()
        location = locate(nested)
        assert location.lockfile is None
        assert location.manifest == manifest

    def test_nothing_found(self, tmp_path):
        location = locate(tmp_path)
        assert location.lockfile is None
        assert location.manifest is None
