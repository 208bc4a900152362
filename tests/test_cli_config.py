from __future__ import annotations

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from pydantic import ValidationError

from tracker_cli.config import AppConfig, load_config


class TestConfig(unittest.TestCase):
    def test_load_config_valid_yaml(self) -> None:
        with TemporaryDirectory() as td:
            cfg_path = Path(td) / "cfg.yaml"
            cfg_path.write_text(
                """
server:
  base_url: "http://localhost:8080"
  timeout_s: 2.5
device:
  id: "ESP32_042"
schedule:
  interval_s: 0.5
  start_hour: 0
  end_hour: 23
  max_reports: 3
""".lstrip(),
                encoding="utf-8",
            )

            cfg = load_config(cfg_path)
            self.assertEqual(cfg.device.id, "ESP32_042")
            self.assertEqual(cfg.schedule.max_reports, 3)
            self.assertEqual(cfg.server.timeout_s, 2.5)
            self.assertTrue(str(cfg.server.base_url).startswith("http://localhost:8080"))

    def test_empty_file_uses_firmware_defaults(self) -> None:
        with TemporaryDirectory() as td:
            cfg_path = Path(td) / "cfg.yaml"
            cfg_path.write_text("", encoding="utf-8")

            cfg = load_config(cfg_path)
            self.assertEqual(cfg.device.id, "ESP32_001")
            self.assertEqual(cfg.schedule.start_hour, 8)
            self.assertEqual(cfg.schedule.end_hour, 19)
            self.assertIsNone(cfg.schedule.max_reports)

    def test_inverted_window_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            AppConfig.model_validate({"schedule": {"start_hour": 20, "end_hour": 8}})

    def test_non_positive_interval_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            AppConfig.model_validate({"schedule": {"interval_s": 0}})
