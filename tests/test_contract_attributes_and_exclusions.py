from __future__ import annotations

import re
import unittest

from simcal.state import CalendarState
from simcal.util.markup import format_attributes, sanitize_identifier, strip_tags

# June 2023 Sundays
SUNDAYS = ("2023-06-04", "2023-06-11", "2023-06-18", "2023-06-25")


def _cell_open(html: str, iso: str) -> str:
    m = re.search(rf'<td data-simcal-id="{iso}"[^>]*>', html)
    assert m is not None, iso
    return m.group(0)


class TestAttributesAndExclusionsContract(unittest.TestCase):
    def test_excluded_sundays_are_disabled(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_excluded_days([0])
        html = s.render()
        self.assertEqual(html.count("simcal-disabled"), 4)
        for iso in SUNDAYS:
            self.assertIn('class="simcal-disabled"', _cell_open(html, iso))
        self.assertIn('class=""', _cell_open(html, "2023-06-05"))

    def test_active_days_only_suppresses_attributes_on_disabled_cells(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_excluded_days(["sunday"])
        s.set_custom_attributes({"data-date": ":simcal_date:"}, True)
        html = s.render()
        for iso in SUNDAYS:
            self.assertNotIn("data-date=", _cell_open(html, iso))
        self.assertIn('data-date="2023-06-05"', _cell_open(html, "2023-06-05"))
        self.assertEqual(html.count("data-date="), 30 - 4)

    def test_attributes_on_all_days_when_flag_is_off(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_excluded_days([0])
        s.set_custom_attributes({"data-date": ":simcal_date:"}, False)
        html = s.render()
        self.assertIn('data-date="2023-06-04"', _cell_open(html, "2023-06-04"))
        self.assertEqual(html.count("data-date="), 30)

    def test_highlight_and_disabled_classes_combine(self) -> None:
        s = CalendarState("2023-06", highlight="2023-06-11")
        s.set_excluded_days([0])
        self.assertIn('class="simcal-highlight simcal-disabled"', _cell_open(s.render(), "2023-06-11"))

    def test_attribute_keys_and_values_are_escaped(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        s.set_custom_attributes({"data my<b>key</b>": 'say "hi" <now>', "onclick": "pick(':simcal_date:')"})
        cell = _cell_open(s.render(), "2023-06-02")
        self.assertIn('data-mykey="say &quot;hi&quot; &lt;now&gt;"', cell)
        self.assertIn('onclick="pick(&#x27;2023-06-02&#x27;)"', cell)

    def test_no_attributes_means_no_extra_markup(self) -> None:
        s = CalendarState("2023-06", highlight=False)
        self.assertEqual(s.custom_attributes_markup(), "")
        self.assertEqual(_cell_open(s.render(), "2023-06-02"), '<td data-simcal-id="2023-06-02" class="">')

    def test_markup_helpers(self) -> None:
        self.assertEqual(strip_tags("a<b>b</b><br/>c"), "abc")
        self.assertEqual(sanitize_identifier("two words"), "two-words")
        self.assertEqual(sanitize_identifier(None), "")
        self.assertEqual(format_attributes({}), "")
        self.assertEqual(format_attributes({"a b": "&"}), ' a-b="&amp;"')


if __name__ == "__main__":
    unittest.main(verbosity=2)
