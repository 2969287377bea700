# Copyright 2026 BrainX Ecosystem Limited. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

"""User-level configuration persistence for lazyrand.

Stores the default scales of entropy-seeded random providers in a JSON
file at a platform-appropriate location. Supports atomic writes, schema
versioning, and cached loading.

Config locations:
    - Linux:   ~/.config/lazyrand/defaults.json
    - macOS:   ~/Library/Application Support/lazyrand/defaults.json
    - Windows: %APPDATA%/lazyrand/defaults.json
"""

import json
import os
import platform
import tempfile
import warnings
from typing import Any, Dict, Optional, Tuple

from ._error import ConfigurationError

__all__ = [
    'DEFAULT_SCALE',
    'DEFAULT_SECONDARY_SCALE',
    'DEFAULT_TERTIARY_SCALE',
    'load_user_defaults',
    'save_user_defaults',
    'get_user_default',
    'set_user_default',
    'clear_user_defaults',
    'get_config_path',
    'invalidate_cache',
    'get_default_scales',
]

DEFAULT_SCALE = 32
DEFAULT_SECONDARY_SCALE = 8
DEFAULT_TERTIARY_SCALE = 2

_BUILTIN_DEFAULTS = {
    'scale': DEFAULT_SCALE,
    'secondary_scale': DEFAULT_SECONDARY_SCALE,
    'tertiary_scale': DEFAULT_TERTIARY_SCALE,
}

_SCHEMA_VERSION = 1
_SUPPORTED_SCHEMA_VERSIONS = {1}
_cache: Optional[Dict[str, Any]] = None


def get_config_path() -> str:
    """Return the platform-appropriate path for the lazyrand config file.

    Returns
    -------
    str
        Absolute path to the ``defaults.json`` configuration file.

    Notes
    -----
    The platform-specific base directories are:

    - **Windows**: ``%APPDATA%/lazyrand/defaults.json`` (falls back to
      ``~/lazyrand/defaults.json`` if ``APPDATA`` is not set).
    - **macOS**: ``~/Library/Application Support/lazyrand/defaults.json``.
    - **Linux / other**: ``$XDG_CONFIG_HOME/lazyrand/defaults.json`` (falls
      back to ``~/.config/lazyrand/defaults.json`` if ``XDG_CONFIG_HOME`` is
      not set).
    """
    system = platform.system()
    if system == 'Windows':
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
    elif system == 'Darwin':
        base = os.path.join(os.path.expanduser('~'), 'Library', 'Application Support')
    else:
        base = os.environ.get('XDG_CONFIG_HOME', os.path.join(os.path.expanduser('~'), '.config'))
    return os.path.join(base, 'lazyrand', 'defaults.json')


def _empty_config() -> Dict[str, Any]:
    return {'schema_version': _SCHEMA_VERSION, 'defaults': {}}


def _read_config_file(path: str) -> Dict[str, Any]:
    """Read and validate the JSON configuration file.

    Returns an empty default structure if the file is missing, corrupted,
    or has an unsupported schema version.
    """
    if not os.path.isfile(path):
        return _empty_config()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        warnings.warn(
            f"lazyrand: Corrupted config file at {path}: {e}. Using built-in defaults.",
            stacklevel=3,
        )
        return _empty_config()

    if not isinstance(data, dict):
        warnings.warn(
            f"lazyrand: Corrupted config file at {path}: top level is not an object. "
            f"Using built-in defaults.",
            stacklevel=3,
        )
        return _empty_config()

    schema_ver = data.get('schema_version', 0)
    if schema_ver not in _SUPPORTED_SCHEMA_VERSIONS:
        warnings.warn(
            f"lazyrand: Config file schema version {schema_ver} is not supported "
            f"(supported: {_SUPPORTED_SCHEMA_VERSIONS}). Ignoring user defaults.",
            stacklevel=3,
        )
        return _empty_config()

    return data


def _write_config_file(path: str, data: Dict[str, Any]):
    """Atomically write the configuration dictionary to a JSON file.

    Uses a temporary file and ``os.replace`` so the config file is never left
    partially written.
    """
    config_dir = os.path.dirname(path)
    try:
        os.makedirs(config_dir, exist_ok=True)
    except OSError as e:
        warnings.warn(
            f"lazyrand: Cannot create config directory {config_dir}: {e}. "
            f"Default persistence skipped.",
            stacklevel=3,
        )
        return

    try:
        fd, tmp_path = tempfile.mkstemp(dir=config_dir, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, sort_keys=True)
                f.write('\n')
            os.replace(tmp_path, path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
    except OSError as e:
        warnings.warn(
            f"lazyrand: Cannot write config file {path}: {e}. "
            f"Default persistence skipped.",
            stacklevel=3,
        )


def _check_default(name: str, value):
    if name not in _BUILTIN_DEFAULTS:
        raise ConfigurationError(
            f'unknown default {name!r}. Known defaults: {sorted(_BUILTIN_DEFAULTS)}'
        )
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f'default {name!r} must be an integer. Invalid value: {value!r}')


def invalidate_cache():
    """Clear the in-memory configuration cache, forcing a re-read on next access.

    See Also
    --------
    load_user_defaults : Load (and cache) user defaults from the config file.
    clear_user_defaults : Remove all user defaults and delete the config file.
    """
    global _cache
    _cache = None


def load_user_defaults() -> Dict[str, int]:
    """Load user-configured default scales from the config file.

    Results are cached in memory; subsequent calls return the cached copy
    unless :func:`invalidate_cache` has been called.

    Returns
    -------
    dict of str to int
        A dictionary mapping default names (``"scale"``,
        ``"secondary_scale"``, ``"tertiary_scale"``) to values. Only the
        names the user has set are present.

    Examples
    --------
    .. code-block:: python

        >>> import lazyrand
        >>> lazyrand.config.load_user_defaults()  # doctest: +SKIP
        {'scale': 16}
    """
    global _cache
    if _cache is not None:
        return _cache.get('defaults', {})

    _cache = _read_config_file(get_config_path())
    return _cache.get('defaults', {})


def save_user_defaults(defaults: Dict[str, int]):
    """Save user-configured default scales to the config file.

    Merges the provided defaults with any existing ones on disk and writes
    the result atomically. The in-memory cache is updated to reflect the
    new state.

    Parameters
    ----------
    defaults : dict of str to int
        Default names mapped to integer values.

    Raises
    ------
    ConfigurationError
        If a name is unknown or a value is not an integer.
    """
    global _cache
    for name, value in defaults.items():
        _check_default(name, value)

    path = get_config_path()
    existing = _read_config_file(path)
    existing_defaults = existing.get('defaults', {})
    existing_defaults.update(defaults)
    existing['defaults'] = existing_defaults
    existing['schema_version'] = _SCHEMA_VERSION
    _write_config_file(path, existing)

    _cache = existing


def get_user_default(name: str) -> Optional[int]:
    """Return the user's value for the default ``name``, or ``None`` if unset."""
    return load_user_defaults().get(name)


def set_user_default(name: str, value: int):
    """Set and persist a single default.

    Examples
    --------
    .. code-block:: python

        >>> import lazyrand
        >>> lazyrand.config.set_user_default('scale', 16)  # doctest: +SKIP
        >>> lazyrand.RandomProvider().scale  # doctest: +SKIP
        16
    """
    save_user_defaults({name: value})


def clear_user_defaults():
    """Remove all user defaults and delete the config file.

    A ``UserWarning`` is issued if the config file cannot be deleted. The
    in-memory cache is still cleared in that case.
    """
    global _cache
    path = get_config_path()
    try:
        if os.path.isfile(path):
            os.unlink(path)
    except OSError as e:
        warnings.warn(
            f"lazyrand: Cannot delete config file {path}: {e}.",
            stacklevel=3,
        )
    _cache = None


def get_default_scales() -> Tuple[int, int, int]:
    """Return the ``(scale, secondary_scale, tertiary_scale)`` of entropy-seeded providers.

    User defaults override the built-in values ``(32, 8, 2)``. Providers built
    from an explicit seed ignore user defaults. A stored value that is not an
    integer is ignored with a warning.
    """
    user = load_user_defaults()
    scales = []
    for name, builtin in _BUILTIN_DEFAULTS.items():
        value = user.get(name, builtin)
        if isinstance(value, bool) or not isinstance(value, int):
            warnings.warn(
                f"lazyrand: Ignoring invalid user default {name}={value!r}. "
                f"Using built-in value {builtin}.",
                stacklevel=3,
            )
            value = builtin
        scales.append(value)
    return scales[0], scales[1], scales[2]
