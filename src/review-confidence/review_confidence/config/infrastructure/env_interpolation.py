"""Environment variable expansion for parsed config data.

String values may reference ``${NAME}`` (required) or ``${NAME:-fallback}``
(optional, the fallback is used when NAME is unset).
"""

import os
import re
from collections.abc import Iterator

_REFERENCE = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return required variables that are unset, in first-seen order, each once."""
    missing: list[str] = []
    for text in _strings(data):
        for match in _REFERENCE.finditer(text):
            name = match["name"]
            if match["default"] is None and name not in os.environ:
                if name not in missing:
                    missing.append(name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Return a copy of data with every reference expanded.

    Required references must be set; check with `collect_missing_vars` first.
    """
    if isinstance(data, str):
        return _REFERENCE.sub(_expand, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data


def _expand(match: re.Match[str]) -> str:
    if match["default"] is None:
        return os.environ[match["name"]]
    return os.environ.get(match["name"], match["default"])


def _strings(data: RawValue) -> Iterator[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _strings(item)
    elif isinstance(data, dict):
        for value in data.values():
            yield from _strings(value)
