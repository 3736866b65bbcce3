import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ingest.normalize.utils import (  # noqa: E402
    bullets_from,
    extract_dates,
    is_bullet_like,
    is_date_only_line,
    split_lines,
    strip_bullet_prefix,
)


class BulletTests(unittest.TestCase):
    def test_explicit_markers_are_stripped(self):
        lines = ["- Led a team", "• Built the billing service", "1. Shipped the mobile app", "(2) Reviewed code"]
        self.assertEqual(
            bullets_from(lines),
            ["Led a team", "Built the billing service", "Shipped the mobile app", "Reviewed code"],
        )

    def test_non_bullet_lines_dropped_when_markers_exist(self):
        self.assertEqual(bullets_from(["2021 - Present", "- Led a team of 5"]), ["Led a team of 5"])

    def test_sentence_fallback_without_markers(self):
        lines = ["Led the team. Built the platform!", "Reduced costs; improved uptime"]
        self.assertEqual(
            bullets_from(lines),
            ["Led the team.", "Built the platform!", "Reduced costs", "improved uptime"],
        )

    def test_duplicates_and_short_fragments_removed(self):
        lines = ["- Led a team", "-  Led   a team", "- ok", "- Built it"]
        self.assertEqual(bullets_from(lines), ["Led a team", "Built it"])

    def test_empty_input_gives_empty_list(self):
        self.assertEqual(bullets_from([]), [])

    def test_unmarked_punctuated_text_yields_items(self):
        self.assertGreaterEqual(len(bullets_from(["Designed the schema and wrote the migrations."])), 1)

    def test_marker_helpers(self):
        self.assertTrue(is_bullet_like("– Drove adoption"))
        self.assertTrue(is_bullet_like("3) Third point"))
        self.assertFalse(is_bullet_like("3.5 GPA"))
        self.assertFalse(is_bullet_like("Senior Engineer"))
        self.assertEqual(strip_bullet_prefix("▪ Wrote docs"), "Wrote docs")

    def test_split_lines_trims_and_drops_blanks(self):
        self.assertEqual(split_lines("  a \r\n\n b\n   \n"), ["a", "b"])


class DateTests(unittest.TestCase):
    def test_year_to_present(self):
        self.assertEqual(extract_dates("2021 - Present"), ("2021", "Present"))

    def test_month_names_pass_through(self):
        self.assertEqual(extract_dates("Jan 2020 – Dec 2022"), ("Jan 2020", "Dec 2022"))

    def test_word_separator(self):
        self.assertEqual(extract_dates("2018 to 2020"), ("2018", "2020"))

    def test_localized_separator(self):
        self.assertEqual(extract_dates("2015 bis heute"), ("2015", "heute"))

    def test_numeric_month_format(self):
        self.assertEqual(extract_dates("03/2019 - 05/2021"), ("03/2019", "05/2021"))

    def test_two_bare_years(self):
        self.assertEqual(extract_dates("Acme 2019, 2021"), ("2019", "2021"))

    def test_single_year(self):
        self.assertEqual(extract_dates("Graduated 2019"), ("2019", ""))

    def test_no_year(self):
        self.assertEqual(extract_dates("No dates here"), ("", ""))

    def test_date_only_line(self):
        self.assertTrue(is_date_only_line("2021 - Present"))
        self.assertTrue(is_date_only_line("(Jan 2019 – Mar 2020)"))
        self.assertFalse(is_date_only_line("- Led the 2020 migration"))
        self.assertFalse(is_date_only_line("Senior Engineer at Acme Corporation since 2019"))
        self.assertFalse(is_date_only_line("Present"))


if __name__ == "__main__":
    unittest.main()
