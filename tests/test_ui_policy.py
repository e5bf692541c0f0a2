"""Tests for display policy that needs no running QApplication.

Covers: pmt.ui.theme, pmt.ui.keys
"""

import unittest

from PySide6.QtCore import Qt

from pmt.ui.keys import KEY_ACTIONS, action_for_key
from pmt.ui.theme import COLORS, progress_color, track_color


class TestProgressColor(unittest.TestCase):

    def test_green_below_three_quarters(self):
        self.assertEqual(progress_color(0.0), COLORS["green"])
        self.assertEqual(progress_color(0.74), COLORS["green"])

    def test_orange_from_three_quarters(self):
        self.assertEqual(progress_color(0.75), COLORS["orange"])
        self.assertEqual(progress_color(0.87), COLORS["orange"])

    def test_red_from_seven_eighths(self):
        self.assertEqual(progress_color(0.875), COLORS["red"])
        self.assertEqual(progress_color(1.0), COLORS["red"])

    def test_complete_is_always_red(self):
        self.assertEqual(progress_color(0.1, complete=True), COLORS["red"])

    def test_track_color(self):
        self.assertEqual(track_color(True), COLORS["track_running"])
        self.assertEqual(track_color(False), COLORS["track_stopped"])


class TestKeyBindings(unittest.TestCase):

    def test_reset_keys(self):
        self.assertEqual(action_for_key(Qt.Key_Escape), "reset")
        self.assertEqual(action_for_key(Qt.Key_Delete), "reset")
        self.assertEqual(action_for_key(Qt.Key_Backspace), "reset")

    def test_start_or_stop_keys(self):
        self.assertEqual(action_for_key(Qt.Key_Space), "start_or_stop")
        self.assertEqual(action_for_key(Qt.Key_Return), "start_or_stop")
        self.assertEqual(action_for_key(Qt.Key_Enter), "start_or_stop")

    def test_other_keys_unbound(self):
        self.assertIsNone(action_for_key(Qt.Key_A))

    def test_backspace_is_mac_delete(self):
        """The Mac "delete" key arrives as Backspace and must reset like forward delete."""
        self.assertEqual(action_for_key(Qt.Key_Backspace), action_for_key(Qt.Key_Delete))

    def test_actions_name_real_timer_methods(self):
        from pmt.core.countdown import CountdownTimer
        for action in set(KEY_ACTIONS.values()):
            self.assertTrue(callable(getattr(CountdownTimer, action)))



class TestDialogFont(unittest.TestCase):

    def test_dialog_uses_theme_font(self):
        from pmt.ui import theme
        from pmt.ui.dialogs import settings
        self.assertEqual(settings.FONT_FAMILY, theme.FONT_FAMILY)

if __name__ == "__main__":
    unittest.main()
