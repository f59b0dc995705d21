from fallingwords.highscore import HighScoreStore, default_path


def test_missing_file_loads_zero(tmp_path):
    assert HighScoreStore(tmp_path / "nope.json").load() == 0


def test_save_then_load(tmp_path):
    store = HighScoreStore(tmp_path / "nested" / "hs.json")
    store.save(340)
    assert store.load() == 340
    assert '"high_score": 340' in store.path.read_text(encoding="utf-8")


def test_malformed_file_loads_zero(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text("{not json", encoding="utf-8")
    assert HighScoreStore(path).load() == 0


def test_invalid_values_load_zero(tmp_path):
    path = tmp_path / "hs.json"
    for raw in ('{"high_score": -5}', '{"high_score": "lots"}', '[1, 2]', '{"high_score": true}'):
        path.write_text(raw, encoding="utf-8")
        assert HighScoreStore(path).load() == 0


def test_data_dir_override(tmp_path, monkeypatch):
    monkeypatch.setenv("FALLING_WORDS_DATA_DIR", str(tmp_path))
    assert default_path() == tmp_path / "highscore.json"
    assert HighScoreStore().path == tmp_path / "highscore.json"


def test_unwritable_location_does_not_raise(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    store = HighScoreStore(blocker / "hs.json")
    store.save(10)
    assert store.load() == 0
