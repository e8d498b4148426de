from isoengine.resource_manager import ResourceManager


class RecordingLoader:
    def __init__(self, fail=False):
        self.paths = []
        self.fail = fail

    def __call__(self, path):
        self.paths.append(path)
        if self.fail:
            raise OSError("cannot read")
        return ("texture", path.name)


def test_loads_bmp_from_base_path(tmp_path):
    loader = RecordingLoader()
    resources = ResourceManager(tmp_path, loader)
    texture = resources.get_texture("block")
    assert loader.paths == [tmp_path / "block.bmp"]
    assert texture == ("texture", "block.bmp")


def test_texture_is_cached(tmp_path):
    loader = RecordingLoader()
    resources = ResourceManager(tmp_path, loader)
    first = resources.get_texture("block")
    second = resources.get_texture("block")
    assert first is second
    assert len(loader.paths) == 1
    assert "block" in resources


def test_failed_load_returns_none_and_is_not_cached(tmp_path):
    loader = RecordingLoader(fail=True)
    resources = ResourceManager(tmp_path, loader)
    assert resources.get_texture("missing") is None
    assert resources.get_texture("missing") is None
    assert len(loader.paths) == 2
    assert len(resources) == 0


def test_unload_forces_reload(tmp_path):
    loader = RecordingLoader()
    resources = ResourceManager(tmp_path, loader)
    resources.get_texture("block")
    assert resources.unload_texture("block") is True
    assert "block" not in resources
    resources.get_texture("block")
    assert len(loader.paths) == 2


def test_unload_unknown_texture_reports_false(tmp_path):
    resources = ResourceManager(tmp_path, RecordingLoader())
    assert resources.unload_texture("nothing") is False


def test_cleanup_empties_cache(tmp_path):
    resources = ResourceManager(tmp_path, RecordingLoader())
    resources.get_texture("a")
    resources.get_texture("b")
    resources.cleanup()
    assert len(resources) == 0


def test_default_loader_missing_file_returns_none(tmp_path):
    resources = ResourceManager(tmp_path)
    assert resources.get_texture("absent") is None
    assert len(resources) == 0