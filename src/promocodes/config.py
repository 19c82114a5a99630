"""Preset configuration: bundled defaults, YAML presets and CLI overrides."""

from __future__ import annotations

from pathlib import Path

import yaml

from promocodes.errors import InvalidArgument
from promocodes.wordlist import DEFAULT_WORDLIST, MAX_WORD_LEN, MIN_WORD_LEN


_BUNDLED_DIR = Path(__file__).parent / "presets"

DEFAULTS = {
    "count": 3,
    "wordlist": DEFAULT_WORDLIST,
    "min_len": MIN_WORD_LEN,
    "max_len": MAX_WORD_LEN,
    "display": "interactive",
}

_TYPES = {
    "count": int,
    "wordlist": str,
    "min_len": int,
    "max_len": int,
    "display": str,
}


def _search_dirs(search_dirs: list[Path] | None) -> list[Path]:
    """User directories first, bundled presets last."""
    return [Path(d) for d in (search_dirs or [])] + [_BUNDLED_DIR]


def load_preset(name: str, search_dirs: list[Path] | None = None) -> dict:
    """Load the raw settings of a preset by name.

    Raises FileNotFoundError if no directory holds '<name>.yaml' and
    InvalidArgument if the file is not a mapping of known keys.
    """
    dirs = _search_dirs(search_dirs)
    for d in dirs:
        path = d / f"{name}.yaml"
        if path.exists():
            with open(path) as f:
                try:
                    data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise InvalidArgument(f"Preset '{name}' is not valid YAML: {e}") from e
            if not isinstance(data, dict):
                raise InvalidArgument(f"Preset '{name}' must be a mapping of settings.")
            unknown = sorted(str(k) for k in data if k not in DEFAULTS)
            if unknown:
                raise InvalidArgument(f"Preset '{name}' has unknown settings: {', '.join(unknown)}.")
            return data
    raise FileNotFoundError(
        f"Preset '{name}' not found. Searched: {', '.join(str(d) for d in dirs)}"
    )


def merge_config(base: dict, *layers: dict) -> dict:
    """Overlay each layer on base in turn. None values in a layer are ignored."""
    result = dict(base)
    for layer in layers:
        result.update({k: v for k, v in layer.items() if v is not None})
    return result


def check_config(config: dict) -> dict:
    """Raise InvalidArgument if a setting has the wrong type."""
    for key, expected in _TYPES.items():
        value = config[key]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, expected):
            raise InvalidArgument(
                f"Setting '{key}' must be {expected.__name__}, got {value!r}."
            )
    return config


def load_config(preset: str | None = None, overrides: dict | None = None,
                search_dirs: list[Path] | None = None) -> dict:
    """Return DEFAULTS overlaid by the named preset, then by overrides."""
    layers = [load_preset(preset, search_dirs)] if preset else []
    return check_config(merge_config(DEFAULTS, *layers, overrides or {}))


def list_presets(search_dirs: list[Path] | None = None) -> list[str]:
    """List available preset names from bundled and user directories."""
    return sorted({
        f.stem
        for d in _search_dirs(search_dirs) if d.is_dir()
        for f in d.glob("*.yaml")
    })
