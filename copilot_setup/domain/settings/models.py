"""
Settings domain models
"""
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

SettingsDocument = Dict[str, Any]
SettingsOverrides = List[Tuple[str, Any]]


def normalize_overrides(
    overrides: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]],
) -> SettingsOverrides:
    """Turn a mapping or an iterable of pairs into an ordered override table"""
    if isinstance(overrides, Mapping):
        return list(overrides.items())
    return [(str(key), value) for key, value in overrides]
