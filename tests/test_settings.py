from pathlib import Path

from boggle.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["BIG_BOGGLE"] == cfg.BIG_BOGGLE
    assert result["MAX_ROUNDS"] == cfg.MAX_ROUNDS


def test_dictionary_path_defaults_to_base_dir(tmp_path):
    cfg = Settings(BASE_DIR=tmp_path)
    assert cfg.DICTIONARY_PATH == tmp_path / "dictionary.txt"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("BIG_BOGGLE", "yes")
    monkeypatch.setenv("MAX_ROUNDS", "3")
    monkeypatch.setenv("COMPUTER_TIME_BUDGET", "0.25")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = _fresh_settings()
    assert cfg.BIG_BOGGLE is True
    assert cfg.MAX_ROUNDS == 3
    assert cfg.COMPUTER_TIME_BUDGET == 0.25
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_ROUNDS=7)
    assert errors == {}
    assert cfg.MAX_ROUNDS == 7


def test_update_bool_from_json_true():
    """JSON sends true/false as Python bool, not string."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, BIG_BOGGLE=True)
    assert errors == {}
    assert cfg.BIG_BOGGLE is True


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_float_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, COMPUTER_TIME_BUDGET=1.5)
    assert errors == {}
    assert cfg.COMPUTER_TIME_BUDGET == 1.5


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PORT=8000)
    assert "PORT" in errors
    assert cfg.PORT != 8000


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_bad_value_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_ROUNDS="lots", COMPUTER_TIME_BUDGET=-1)
    assert set(errors) == {"MAX_ROUNDS", "COMPUTER_TIME_BUDGET"}
    assert cfg.MAX_ROUNDS == 100
    assert cfg.COMPUTER_TIME_BUDGET == 0.0


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_ROUNDS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_ROUNDS == 25


def test_bundled_dictionary_loads():
    from boggle.lexicon import load_lexicon

    cfg = _fresh_settings()
    lexicon = load_lexicon(str(cfg.DICTIONARY_PATH), cfg.MIN_DICTIONARY_WORD_LENGTH)
    assert len(lexicon) > 100
    assert lexicon.contains("STONE")


def test_max_rounds_has_a_minimum_of_one():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_ROUNDS=0)
    assert errors == {"MAX_ROUNDS": "must be at least 1"}
    assert cfg.MAX_ROUNDS == 100

    assert update_settings(cfg, MAX_ROUNDS=1) == {}
    assert cfg.MAX_ROUNDS == 1
