from __future__ import annotations

import random
import unittest
from datetime import datetime

from tracker_cli.models import TrackerReport, random_report, within_window
from tracker_service.services.decoder import PAYLOAD_LENGTH, decode_payload


class TestModels(unittest.TestCase):
    def test_random_report_is_decodable(self) -> None:
        rng = random.Random(7)
        now = datetime(2024, 1, 1, 9, 5, 7)
        for _ in range(100):
            report = random_report("ESP32_001", now, rng=rng)
            self.assertEqual(len(report.payload), PAYLOAD_LENGTH)
            self.assertEqual(report.payload, report.payload.upper())
            decoded = decode_payload(report.payload)
            self.assertLess(decoded.longitude, 0xFFFF)
            self.assertLess(decoded.latitude, 0xFFFF)
            self.assertLessEqual(decoded.battery, 100)

    def test_random_report_formats_date_and_time(self) -> None:
        report = random_report("dev1", datetime(2024, 3, 9, 8, 4, 2), rng=random.Random(0))
        self.assertEqual(report.date, "2024-03-09")
        self.assertEqual(report.time, "08:04:02")

    def test_as_ingest_dict(self) -> None:
        report = TrackerReport(device_id="dev1", payload="0A1B2C3D4E", date="2024-01-01", time="12:00:00")
        self.assertEqual(
            report.as_ingest_dict(),
            {"id": "dev1", "payload": "0A1B2C3D4E", "date": "2024-01-01", "time": "12:00:00"},
        )

    def test_within_window_is_inclusive(self) -> None:
        self.assertTrue(within_window(8, start_hour=8, end_hour=19))
        self.assertTrue(within_window(19, start_hour=8, end_hour=19))
        self.assertFalse(within_window(7, start_hour=8, end_hour=19))
        self.assertFalse(within_window(20, start_hour=8, end_hour=19))
