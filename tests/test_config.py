"""Tests for the persisted preferences file.

Covers: pmt.core.config
"""

import json
import shutil
import tempfile
import time
import unittest
from unittest.mock import patch
from pathlib import Path


class TestPrefs(unittest.TestCase):
    """Tests for prefs.json loading, defaulting and the remembered duration."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self._tmppath = Path(self.tmpdir)

        # Monkey-patch the prefs path to use temp dir
        from pmt.core import config
        self._orig_prefs_path = config.PREFS_PATH
        config.PREFS_PATH = self._tmppath / "prefs.json"

    def tearDown(self):
        from pmt.core import config
        config.PREFS_PATH = self._orig_prefs_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _write(self, payload):
        from pmt.core import config
        with open(config.PREFS_PATH, "w", encoding="utf-8") as f:
            if isinstance(payload, str):
                f.write(payload)
            else:
                json.dump(payload, f)

    def test_fresh_start_returns_defaults(self):
        """No prefs file → default prefs, nothing written yet."""
        from pmt.core import config
        prefs = config.load_prefs()
        self.assertEqual(prefs["meta"]["schema_version"], 1)
        self.assertEqual(prefs["settings"][config.DURATION_KEY], 180)
        self.assertTrue(prefs["settings"]["start_fullscreen"])
        self.assertFalse(config.PREFS_PATH.exists())

    def test_fresh_start_duration_is_default(self):
        from pmt.core import config
        self.assertEqual(config.load_duration(), 180)

    def test_save_and_load_roundtrip(self):
        from pmt.core import config
        prefs = config.load_prefs()
        prefs["settings"]["start_fullscreen"] = True
        prefs["settings"][config.DURATION_KEY] = 300
        config.save_prefs(prefs)

        loaded = config.load_prefs()
        self.assertTrue(loaded["settings"]["start_fullscreen"])
        self.assertEqual(loaded["settings"][config.DURATION_KEY], 300)

    def test_save_updates_saved_at(self):
        from pmt.core import config
        prefs = config.load_prefs()
        old_ts = prefs["meta"]["saved_at"]
        time.sleep(0.05)
        config.save_prefs(prefs)
        self.assertNotEqual(old_ts, prefs["meta"]["saved_at"])

    def test_save_duration_remembers_value(self):
        from pmt.core import config
        config.save_duration(245)
        self.assertEqual(config.load_duration(), 245)
        with open(config.PREFS_PATH, "r", encoding="utf-8") as f:
            on_disk = json.load(f)
        self.assertEqual(on_disk["settings"]["Countdown duration"], 245)

    def test_save_duration_keeps_other_settings(self):
        from pmt.core import config
        prefs = config.load_prefs()
        prefs["settings"]["always_on_top"] = True
        config.save_prefs(prefs)
        config.save_duration(60)
        self.assertTrue(config.load_prefs()["settings"]["always_on_top"])

    def test_load_fills_missing_settings(self):
        from pmt.core import config
        self._write({"meta": {"schema_version": 1}, "settings": {"start_fullscreen": True}})
        loaded = config.load_prefs()
        self.assertTrue(loaded["settings"]["start_fullscreen"])
        self.assertEqual(loaded["settings"][config.DURATION_KEY], 180)
        self.assertFalse(loaded["settings"]["always_on_top"])

    def test_load_repairs_bad_sections(self):
        from pmt.core import config
        self._write({"meta": "nope", "settings": []})
        loaded = config.load_prefs()
        self.assertEqual(loaded["meta"]["schema_version"], 1)
        self.assertEqual(loaded["settings"][config.DURATION_KEY], 180)

    def test_corrupted_file_falls_back_to_defaults(self):
        from pmt.core import config
        self._write("{invalid json!!")
        prefs = config.load_prefs()
        self.assertEqual(prefs["settings"][config.DURATION_KEY], 180)

    def test_undecodable_file_falls_back_to_defaults(self):
        """A prefs.json that isn't valid UTF-8 still loads as defaults."""
        from pmt.core import config
        with open(config.PREFS_PATH, "wb") as f:
            f.write(b'{"settings": {"\xff\xfe": 1}}')
        self.assertEqual(config.load_prefs()["settings"][config.DURATION_KEY], 180)
        self.assertEqual(config.load_duration(), 180)

    def test_non_object_file_falls_back_to_defaults(self):
        """A JSON list at the top level trips the TypeError fallback."""
        from pmt.core import config
        self._write([1, 2, 3])
        prefs = config.load_prefs()
        self.assertEqual(prefs["settings"][config.DURATION_KEY], 180)

    def test_unusable_durations_use_default(self):
        from pmt.core import config
        for stored in (0, -20, "300", 12.5, None, True):
            with self.subTest(stored=stored):
                self._write({"meta": {"schema_version": 1}, "settings": {config.DURATION_KEY: stored}})
                self.assertEqual(config.load_duration(), 180)


class TestDurationSaver(unittest.TestCase):
    """Tests for writing the duration to prefs as the timer changes."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        from pmt.core import config
        self._orig_prefs_path = config.PREFS_PATH
        config.PREFS_PATH = Path(self.tmpdir) / "prefs.json"

        from pmt.core.countdown import CountdownTimer
        self.timer = CountdownTimer(180)
        self.saver = config.DurationSaver(self.timer.duration)
        self.timer.subscribe(self.saver)

    def tearDown(self):
        from pmt.core import config
        config.PREFS_PATH = self._orig_prefs_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_set_duration_saves(self):
        from pmt.core import config
        self.timer.set_duration(300)
        self.assertEqual(config.load_duration(), 300)
        self.assertEqual(self.saver.saved_duration, 300)

    def test_minute_adjustments_save(self):
        from pmt.core import config
        self.timer.add_minute()
        self.assertEqual(config.load_duration(), 240)
        self.timer.remove_minute()
        self.timer.remove_minute()
        self.assertEqual(config.load_duration(), 120)

    def test_ticks_and_pauses_do_not_save(self):
        from pmt.core import config
        with patch.object(config, "save_duration") as save:
            self.timer.start_or_stop()
            for _ in range(5):
                self.timer.tick()
            self.timer.start_or_stop()
            self.timer.reset()
        save.assert_not_called()
        self.assertFalse(config.PREFS_PATH.exists())

    def test_same_duration_is_not_rewritten(self):
        from pmt.core import config
        with patch.object(config, "save_duration") as save:
            self.timer.set_duration(180)
        save.assert_not_called()

    def test_failed_save_is_logged_and_retried(self):
        from pmt.core import config
        with patch.object(config, "save_duration", side_effect=OSError("disk full")):
            with self.assertLogs("publicmeetingtimer", level="WARNING"):
                self.timer.set_duration(60)
        self.assertEqual(self.timer.duration, 60)
        self.assertEqual(self.saver.saved_duration, 180)

        # Next change notification writes it out
        self.timer.start_or_stop()
        self.assertEqual(config.load_duration(), 60)
        self.assertEqual(self.saver.saved_duration, 60)


if __name__ == "__main__":
    unittest.main()
