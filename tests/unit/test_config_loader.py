from __future__ import annotations

import json
import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import yaml

import regcreds.config.loader as loader
from regcreds.config import DEFAULT_CONFIG_PATH, OUTPUT_DIR_ENV, ConfigError, dump_example_config, load_config


class ConfigLoaderTests(unittest.TestCase):
    def test_load_config_defaults(self) -> None:
        with patch.dict(os.environ, {OUTPUT_DIR_ENV: ""}, clear=False):
            config = load_config()

        self.assertEqual(config.output.directory, "")
        self.assertEqual(config.logging.level, "INFO")
        self.assertIsNone(config.logging.log_path)

    def test_load_config_applies_overrides(self) -> None:
        overrides = {
            "output.directory": "/srv/creds",
            "logging": {"level": "DEBUG"},
        }

        with patch.dict(os.environ, {OUTPUT_DIR_ENV: "/from/env"}, clear=False):
            config = load_config(overrides=overrides)

        self.assertEqual(config.output.directory, "/srv/creds")
        self.assertEqual(config.logging.level, "DEBUG")

    def test_user_file_merges_over_defaults(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "regcreds.yaml"
            path.write_text("output:\n  directory: ./outputs\n", encoding="utf-8")

            with patch.dict(os.environ, {OUTPUT_DIR_ENV: ""}, clear=False):
                config = load_config(path)

        self.assertEqual(config.output.directory, "./outputs")
        self.assertEqual(config.logging.level, "INFO")

    def test_toml_user_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "regcreds.toml"
            path.write_text('[logging]\nlog_path = "logs/regcreds.log"\n', encoding="utf-8")

            with patch.dict(os.environ, {OUTPUT_DIR_ENV: ""}, clear=False):
                config = load_config(path)

        self.assertEqual(config.logging.log_path, Path("logs/regcreds.log"))

    def test_env_output_dir(self) -> None:
        with patch.dict(os.environ, {OUTPUT_DIR_ENV: " /tmp/creds "}, clear=False):
            config = load_config()

        self.assertEqual(config.output.directory, "/tmp/creds")

    def test_invalid_values_raise_config_error(self) -> None:
        with patch.dict(os.environ, {OUTPUT_DIR_ENV: ""}, clear=False):
            with self.assertRaises(ConfigError):
                load_config(overrides={"logging.level": "LOUD"})

    def test_missing_and_unsupported_files(self) -> None:
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigError):
                load_config(Path(tmpdir) / "absent.yaml")

            ini = Path(tmpdir) / "regcreds.ini"
            ini.write_text("[output]\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(ini)

            listing = Path(tmpdir) / "list.yaml"
            listing.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config(listing)

    def test_dump_example_config_yaml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "nested" / "example.yaml"
            dump_example_config(dest)
            data = yaml.safe_load(dest.read_text(encoding="utf-8"))

        self.assertIn("output", data)
        self.assertIn("logging", data)

    def test_dump_example_config_json(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "example.json"
            dump_example_config(dest)
            data = json.loads(dest.read_text(encoding="utf-8"))

        self.assertEqual(data["output"]["directory"], "")

    def test_defaults_ship_inside_the_package(self) -> None:
        self.assertTrue(DEFAULT_CONFIG_PATH.exists())
        self.assertEqual(DEFAULT_CONFIG_PATH.parent, Path(loader.__file__).resolve().parent)

    def test_missing_default_file_falls_back_to_model_defaults(self) -> None:
        with TemporaryDirectory() as tmpdir:
            absent = Path(tmpdir) / "regcreds.default.yaml"
            dest = Path(tmpdir) / "example.yaml"
            with patch.object(loader, "DEFAULT_CONFIG_PATH", absent), patch.dict(
                os.environ, {OUTPUT_DIR_ENV: ""}, clear=False
            ):
                config = load_config(overrides={"logging.level": "WARNING"})
                dump_example_config(dest)
            data = yaml.safe_load(dest.read_text(encoding="utf-8"))

        self.assertEqual(config.output.directory, "")
        self.assertEqual(config.logging.level, "WARNING")
        self.assertEqual(data, {"output": {"directory": ""}, "logging": {"level": "INFO", "log_path": None}})

    def test_dump_example_config_rejects_toml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "config.toml"
            with self.assertRaises(ConfigError):
                dump_example_config(dest)


if __name__ == "__main__":
    unittest.main()
