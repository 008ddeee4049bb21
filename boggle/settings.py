import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)
    MIN_DICTIONARY_WORD_LENGTH: int = 4

    BIG_BOGGLE: bool = False
    COMPUTER_TIME_BUDGET: float = 0.0
    MAX_ROUNDS: int = 100

    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed while the server is running, with their types
EDITABLE_FIELDS: dict[str, type] = {
    "BIG_BOGGLE": bool,
    "COMPUTER_TIME_BUDGET": float,
    "MAX_ROUNDS": int,
    "DEBUG": bool,
}

# Lowest accepted value per numeric field; a stored round must not be evicted at once
FIELD_MINIMUMS = {
    "COMPUTER_TIME_BUDGET": 0.0,
    "MAX_ROUNDS": 1,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return value


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to ``cfg``. Returns per-field errors; valid fields still apply."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            errors[name] = "not an editable setting"
            continue
        try:
            coerced = _coerce(getattr(cfg, name), value)
        except (TypeError, ValueError) as e:
            errors[name] = f"expected {EDITABLE_FIELDS[name].__name__}: {e}"
            continue
        minimum = FIELD_MINIMUMS.get(name)
        if minimum is not None and coerced < minimum:
            errors[name] = f"must be at least {minimum}"
            continue
        setattr(cfg, name, coerced)
    return errors


settings = Settings()
