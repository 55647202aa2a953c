"""
Unit tests for gffonts_index.config module
"""
import unittest
import tempfile
import os
import shutil
import json
from pathlib import Path
from unittest.mock import patch

from gffonts_index.config import (
    apply_env_overrides,
    get_config_path,
    get_default_config,
    load_config,
    merge_configs,
)


class TestConfigManagement(unittest.TestCase):
    """Test configuration loading"""

    def setUp(self):
        """Set up test environment"""
        self.temp_dir = tempfile.mkdtemp()
        self.env = patch.dict(os.environ, {'HOME': self.temp_dir}, clear=False)
        self.env.start()
        for key in list(os.environ):
            if key.startswith('GFFONTS_INDEX_'):
                del os.environ[key]
        self.config_dir = Path(self.temp_dir) / '.gffonts_index'

    def tearDown(self):
        """Clean up test environment"""
        self.env.stop()
        shutil.rmtree(self.temp_dir)

    def test_get_default_config(self):
        """Test default configuration structure"""
        config = get_default_config()

        self.assertIn('general', config)
        self.assertIn('logging', config)
        self.assertEqual(config['general']['repository_directory'], '~/oss/fonts')
        self.assertEqual(config['general']['family_filter'], '')
        self.assertEqual(config['logging']['level'], 'INFO')

    def test_load_config_no_file(self):
        """Test loading config when no file exists"""
        config = load_config()
        self.assertEqual(config, get_default_config())

    def test_default_config_path(self):
        """Test the path used when no config file exists"""
        self.assertEqual(get_config_path(), self.config_dir / 'config.json')

    def test_load_json_config(self):
        """Test loading a JSON config merged over defaults"""
        self.config_dir.mkdir()
        with open(self.config_dir / 'config.json', 'w') as f:
            json.dump({'general': {'repository_directory': '/src/fonts'}}, f)

        config = load_config()
        self.assertEqual(config['general']['repository_directory'], '/src/fonts')
        self.assertEqual(config['general']['family_filter'], '')

    def test_load_yaml_config(self):
        """Test loading a YAML config"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.yaml').write_text(
            "general:\n  family_filter: ofl/noto\nlogging:\n  level: DEBUG\n"
        )

        config = load_config()
        self.assertEqual(config['general']['family_filter'], 'ofl/noto')
        self.assertEqual(config['logging']['level'], 'DEBUG')

    def test_load_toml_config(self):
        """Test loading a TOML config"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.toml').write_text(
            '[general]\nrepository_directory = "/data/fonts"\n'
        )

        config = load_config()
        self.assertEqual(config['general']['repository_directory'], '/data/fonts')

    def test_env_config_path(self):
        """Test GFFONTS_INDEX_CONFIG points at an explicit file"""
        path = Path(self.temp_dir) / 'custom.json'
        path.write_text(json.dumps({'general': {'family_filter': 'apache'}}))

        with patch.dict(os.environ, {'GFFONTS_INDEX_CONFIG': str(path)}):
            self.assertEqual(get_config_path(), path)
            self.assertEqual(load_config()['general']['family_filter'], 'apache')

    def test_explicit_config_path(self):
        """Test load_config with an explicit path"""
        path = Path(self.temp_dir) / 'explicit.json'
        path.write_text(json.dumps({'logging': {'format': '%(message)s'}}))

        config = load_config(path)
        self.assertEqual(config['logging']['format'], '%(message)s')

    def test_invalid_config_falls_back_to_defaults(self):
        """Test that a broken config file is reported and ignored"""
        self.config_dir.mkdir()
        (self.config_dir / 'config.json').write_text('{not json')

        with self.assertLogs('gffonts_index.config', level='ERROR'):
            config = load_config()
        self.assertEqual(config, get_default_config())

    def test_env_override(self):
        """Test environment variable overrides"""
        with patch.dict(os.environ, {'GFFONTS_INDEX_GENERAL_REPOSITORY_DIRECTORY': '/env/fonts'}):
            config = load_config()
        self.assertEqual(config['general']['repository_directory'], '/env/fonts')


class TestConfigHelpers(unittest.TestCase):
    """Test merge and override helpers"""

    def test_merge_configs_nested(self):
        base = {'general': {'a': 1, 'b': 2}, 'logging': {'level': 'INFO'}}
        merged = merge_configs(base, {'general': {'b': 3}})
        self.assertEqual(merged, {'general': {'a': 1, 'b': 3}, 'logging': {'level': 'INFO'}})
        self.assertEqual(base['general']['b'], 2)

    def test_apply_env_overrides_types(self):
        config = {'general': {'max_depth': 1, 'follow_links': False}}
        environ = {
            'GFFONTS_INDEX_GENERAL_MAX_DEPTH': '7',
            'GFFONTS_INDEX_GENERAL_FOLLOW_LINKS': 'yes',
        }
        config = apply_env_overrides(config, environ)
        self.assertEqual(config['general']['max_depth'], 7)
        self.assertIs(config['general']['follow_links'], True)

    def test_apply_env_overrides_ignores_unknown(self):
        config = get_default_config()
        config = apply_env_overrides(config, {'GFFONTS_INDEX_NOPE_KEY': 'x', 'OTHER_GENERAL_X': 'y'})
        self.assertEqual(config, get_default_config())


if __name__ == '__main__':
    unittest.main()
