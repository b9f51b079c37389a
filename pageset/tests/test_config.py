import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from .. import config
from ..errors import ConfigError


class TestLoadConfig(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.missing_default = Path(self.tmp_dir.name) / "absent.json"
        patchers = [
            patch.object(config, "CONFIG_FILE", str(self.missing_default)),
            patch.object(config.dotenv, "load_dotenv"),
            patch.dict(os.environ, {}, clear=False),
        ]
        for patcher in patchers:
            patcher.start()
            self.addCleanup(patcher.stop)
        for key in ("PAGESET_CAPACITY", "PAGESET_BASE_URL", "PAGESET_LOG_LEVEL"):
            os.environ.pop(key, None)

    def tearDown(self):
        self.tmp_dir.cleanup()

    def write_config(self, payload) -> Path:
        path = Path(self.tmp_dir.name) / "pageset.json"
        path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return path

    def test_defaults(self):
        loaded = config.load_config()
        self.assertEqual(loaded, config.DEFAULT_CONFIG)
        self.assertIsNot(loaded["pagination"], config.DEFAULT_CONFIG["pagination"])

    def test_file_overrides_defaults(self):
        path = self.write_config({"pagination": {"capacity": 25}})
        loaded = config.load_config(path)
        self.assertEqual(loaded["pagination"]["capacity"], 25)
        self.assertEqual(loaded["render"]["base_url"], "www.test.com/")

    def test_environment_overrides_file(self):
        path = self.write_config({"pagination": {"capacity": 25}})
        os.environ["PAGESET_CAPACITY"] = "7"
        os.environ["PAGESET_BASE_URL"] = "example.org/items/"
        os.environ["PAGESET_LOG_LEVEL"] = "DEBUG"
        loaded = config.load_config(path)
        self.assertEqual(loaded["pagination"]["capacity"], 7)
        self.assertEqual(loaded["render"]["base_url"], "example.org/items/")
        self.assertEqual(loaded["logging"]["level"], "DEBUG")

    def test_invalid_capacity_in_environment(self):
        os.environ["PAGESET_CAPACITY"] = "seven"
        with self.assertRaises(ConfigError):
            config.load_config()

    def test_missing_explicit_file(self):
        with self.assertRaises(ConfigError):
            config.load_config(Path(self.tmp_dir.name) / "nope.json")

    def test_malformed_file_falls_back_to_defaults(self):
        path = self.write_config("{not json")
        with self.assertLogs("pageset.config", level="WARNING"):
            loaded = config.load_config(path)
        self.assertEqual(loaded["pagination"]["capacity"], 10)

    def test_top_level_array_rejected(self):
        path = self.write_config("[1, 2]")
        with self.assertRaises(ConfigError):
            config.load_config(path)

    def test_null_section_rejected(self):
        path = self.write_config({"pagination": None})
        with self.assertRaises(ConfigError):
            config.load_config(path)

    def test_scalar_section_rejected(self):
        path = self.write_config({"render": "www.test.com/"})
        with self.assertRaises(ConfigError):
            config.load_config(path)


if __name__ == "__main__":
    unittest.main()
