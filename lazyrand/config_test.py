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

import json
import os
import warnings

import pytest

from lazyrand._error import ConfigurationError
from lazyrand.config import (
    _SCHEMA_VERSION,
    _read_config_file,
    _write_config_file,
    clear_user_defaults,
    get_config_path,
    get_default_scales,
    get_user_default,
    invalidate_cache,
    load_user_defaults,
    save_user_defaults,
    set_user_default,
)


class TestGetConfigPath:
    def test_returns_string(self):
        assert isinstance(get_config_path(), str)

    def test_ends_with_defaults_json(self):
        assert get_config_path().endswith('defaults.json')


class TestReadConfigFile:
    def test_missing_file_returns_default(self):
        data = _read_config_file('/nonexistent/path/defaults.json')
        assert data['schema_version'] == _SCHEMA_VERSION
        assert data['defaults'] == {}

    def test_corrupted_json(self, isolate_config):
        path = isolate_config
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            f.write('not valid json{{{')
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            data = _read_config_file(path)
            assert any('Corrupted' in str(warning.message) for warning in w)
        assert data['defaults'] == {}

    def test_unsupported_schema_version(self, isolate_config):
        path = isolate_config
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump({'schema_version': 999, 'defaults': {'scale': 4}}, f)
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            data = _read_config_file(path)
            assert any('schema version' in str(warning.message) for warning in w)
        assert data['defaults'] == {}

    def test_valid_file(self, isolate_config):
        path = isolate_config
        expected = {'schema_version': 1, 'defaults': {'scale': 16}}
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump(expected, f)
        assert _read_config_file(path) == expected


class TestWriteConfigFile:
    def test_creates_directory_and_file(self, isolate_config):
        path = isolate_config
        _write_config_file(path, {'schema_version': 1, 'defaults': {}})
        assert os.path.isfile(path)
        with open(path) as f:
            assert json.load(f) == {'schema_version': 1, 'defaults': {}}

    def test_no_temp_files_left(self, isolate_config):
        path = isolate_config
        _write_config_file(path, {'schema_version': 1, 'defaults': {'scale': 3}})
        leftovers = [p for p in os.listdir(os.path.dirname(path)) if p.endswith('.tmp')]
        assert leftovers == []


class TestUserDefaults:
    def test_empty_by_default(self):
        assert load_user_defaults() == {}
        assert get_user_default('scale') is None

    def test_set_and_get(self):
        set_user_default('scale', 16)
        assert get_user_default('scale') == 16
        invalidate_cache()
        assert get_user_default('scale') == 16

    def test_merge(self):
        save_user_defaults({'scale': 16})
        save_user_defaults({'secondary_scale': 4})
        invalidate_cache()
        assert load_user_defaults() == {'scale': 16, 'secondary_scale': 4}

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError):
            set_user_default('seed', 3)

    def test_non_integer_value(self):
        with pytest.raises(ConfigurationError):
            set_user_default('scale', 2.5)
        with pytest.raises(ConfigurationError):
            set_user_default('scale', True)

    def test_clear(self, isolate_config):
        set_user_default('scale', 16)
        clear_user_defaults()
        assert not os.path.exists(isolate_config)
        assert load_user_defaults() == {}


class TestDefaultScales:
    def test_builtin(self):
        assert get_default_scales() == (32, 8, 2)

    def test_user_override(self):
        set_user_default('tertiary_scale', 5)
        assert get_default_scales() == (32, 8, 5)

    def test_invalid_stored_value_ignored(self, isolate_config):
        path = isolate_config
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w') as f:
            json.dump({'schema_version': 1, 'defaults': {'scale': 'big'}}, f)
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            assert get_default_scales() == (32, 8, 2)
            assert any('Ignoring invalid' in str(warning.message) for warning in w)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
