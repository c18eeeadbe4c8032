from __future__ import annotations

import calendar
import datetime as dt
import unittest
from unittest.mock import patch

from simcal.model import DEFAULT_CSS_CLASSES, Highlight
from simcal.state import CalendarState
from simcal.validate import ConfigurationError


class TestStateSettersContract(unittest.TestCase):
    def test_month_is_normalized_to_first_day(self) -> None:
        s = CalendarState("2023-06-17", highlight=False)
        self.assertEqual(s.month, dt.date(2023, 6, 1))
        s.set_month(dt.datetime(2024, 2, 29, 13, 45))
        self.assertEqual(s.month, dt.date(2024, 2, 1))

    def test_month_defaults_to_current_month(self) -> None:
        with patch("simcal.state.today_date", return_value=dt.date(2026, 10, 17)):
            s = CalendarState(highlight=False)
            self.assertEqual(s.month, dt.date(2026, 10, 1))
            s.set_month("2020-01")
            s.set_month()
            self.assertEqual(s.month, dt.date(2026, 10, 1))

    def test_invalid_month_string_propagates_parse_error(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        with self.assertRaises(ValueError) as ctx:
            s.set_month("not a date")
        self.assertNotIsInstance(ctx.exception, ConfigurationError)
        self.assertEqual(s.month, dt.date(2023, 6, 1))

    def test_highlight_modes(self) -> None:
        with patch("simcal.validate.today_date", return_value=dt.date(2023, 6, 9)):
            s = CalendarState("2023-06")
            self.assertEqual(s.highlight, dt.date(2023, 6, 9))
            s.set_highlight(False)
            self.assertIsNone(s.highlight)
            s.set_highlight(True)
            self.assertEqual(s.highlight, dt.date(2023, 6, 9))
            s.set_highlight(Highlight.suppressed())
            self.assertIsNone(s.highlight)
            s.set_highlight(Highlight.explicit(dt.date(2023, 6, 2)))
            self.assertEqual(s.highlight, dt.date(2023, 6, 2))

    def test_explicit_highlight_keeps_time_component(self) -> None:
        s = CalendarState("2023-06", highlight="2023-06-12T08:15:00")
        self.assertEqual(s.highlight, dt.datetime(2023, 6, 12, 8, 15))

    def test_unknown_css_class_key_is_rejected_without_changes(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        with self.assertRaises(ConfigurationError):
            s.set_css_classes({"highlight": "hl", "bogus": "x"})
        self.assertEqual(s.css_classes, DEFAULT_CSS_CLASSES)

    def test_non_mapping_css_classes_are_rejected(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        for bad in (["calendar"], "simcal", None):
            with self.assertRaises(ConfigurationError):
                s.set_css_classes(bad)
        self.assertEqual(s.css_classes, DEFAULT_CSS_CLASSES)

    def test_css_classes_override_only_supplied_keys(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_css_classes({"event": "ev"})
        s.set_css_classes({"events": "evs"})
        self.assertEqual(s.css_classes["event"], "ev")
        self.assertEqual(s.css_classes["events"], "evs")
        self.assertEqual(s.css_classes["calendar"], "simcal")

    def test_weekdays_must_have_seven_entries(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        before = s.weekday_labels
        with self.assertRaises(ConfigurationError):
            s.set_weekdays(["a", "b", "c"])
        self.assertEqual(s.weekday_labels, before)
        self.assertEqual(len(before), 7)

    def test_weekdays_string_is_not_split_into_labels(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        before = s.weekday_labels
        with self.assertRaises(ConfigurationError):
            s.set_weekdays("abcdefg")
        self.assertEqual(s.weekday_labels, before)

    def test_empty_weekdays_reset_to_locale_names(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_weekdays(list("1234567"))
        self.assertEqual(s.weekday_labels, list("1234567"))
        s.set_weekdays([])
        self.assertEqual(s.weekday_labels[0], calendar.day_name[6])
        self.assertEqual(s.weekday_labels[1], calendar.day_name[0])

    def test_week_offset_accepts_ints_and_names(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_week_offset(8)
        self.assertEqual(s.week_offset, 1)
        s.set_week_offset(7)
        self.assertEqual(s.week_offset, 0)
        s.set_week_offset("Saturday")
        self.assertEqual(s.week_offset, 6)
        s.set_week_offset("tue")
        self.assertEqual(s.week_offset, 2)

    def test_week_offset_rejects_bad_input_without_changes(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_week_offset(3)
        for bad in (-1, "funday", True, 1.5, None):
            with self.subTest(bad=bad):
                with self.assertRaises(ConfigurationError):
                    s.set_week_offset(bad)
                self.assertEqual(s.week_offset, 3)

    def test_excluded_days_append_and_are_atomic(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_excluded_days([0, "saturday"])
        s.set_excluded_days(["Sun"])
        self.assertEqual(s.excluded_days, [0, 6, 0])
        with self.assertRaises(ConfigurationError):
            s.set_excluded_days([1, -2])
        self.assertEqual(s.excluded_days, [0, 6, 0])

    def test_custom_attributes_merge(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_custom_attributes({"data-a": "1", "data-b": "2"}, True)
        s.set_custom_attributes({"data-b": "3"})
        self.assertEqual(s.custom_attributes, {"data-a": "1", "data-b": "3"})
        self.assertFalse(s.attributes_on_active_days_only)
        self.assertEqual(s.custom_attributes_markup(), ' data-a="1" data-b="3"')

    def test_setters_are_idempotent(self) -> None:
        a = CalendarState("2023-06", highlight=False)
        b = CalendarState("2023-06", highlight=False)
        for s, times in ((a, 1), (b, 2)):
            for _ in range(times):
                s.set_month("2023-06-20")
                s.set_week_offset("monday")
                s.set_css_classes({"event": "ev"})
                s.set_weekdays(list("SMTWTFS"))
                s.set_custom_attributes({"data-x": "y"}, True)
                s.set_table_id("cal one")
        self.assertEqual(a.render(), b.render())

    def test_table_id_is_sanitized(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_table_id("<script>x</script>my cal's")
        self.assertEqual(s.table_id, "xmy-cal&#x27;s")
        s.set_table_id(None)
        self.assertEqual(s.table_id, "")


if __name__ == "__main__":
    unittest.main(verbosity=2)
