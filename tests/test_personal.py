import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ingest.normalize.personal import extract_personal, first_phone  # noqa: E402


class PersonalInfoTests(unittest.TestCase):
    def test_contact_fields_from_anywhere_in_text(self):
        text = "Jane Doe\njane@x.com | 555-123-4567\nPortfolio: https://jane.dev | GitHub"
        info = extract_personal(text, text.splitlines())
        self.assertEqual(info.full_name, "Jane Doe")
        self.assertEqual(info.email, "jane@x.com")
        self.assertEqual(info.phone, "555-123-4567")
        self.assertEqual(info.website, "https://jane.dev")
        self.assertEqual(info.title, "")

    def test_title_and_location_from_header(self):
        header = ["John Smith | Backend Engineer | Berlin, Germany", "john@smith.io"]
        info = extract_personal("\n".join(header), header)
        self.assertEqual(info.title, "Backend Engineer")
        self.assertEqual(info.location, "Berlin, Germany")
        self.assertEqual(info.full_name, "John Smith Backend Engineer Berlin, Germany")

    def test_dash_separated_title(self):
        header = ["Jane Doe — Data Scientist"]
        info = extract_personal(header[0], header)
        self.assertEqual(info.title, "Data Scientist")

    def test_long_first_line_is_not_a_name(self):
        first = "Experienced engineer with a decade of work across fintech, logistics and health platforms"
        info = extract_personal(first + "\nmore text", [first])
        self.assertEqual(info.full_name, "")

    def test_year_range_is_not_a_phone(self):
        self.assertEqual(first_phone("Acme 2018-2022\nCall +1 415 555 0100"), "+1 415 555 0100")
        self.assertEqual(first_phone("2018-2022 only"), "")

    def test_empty_text_defaults(self):
        info = extract_personal("", [])
        self.assertEqual(info.model_dump(), {
            "full_name": "",
            "title": "",
            "email": "",
            "phone": "",
            "location": "",
            "website": "",
        })


if __name__ == "__main__":
    unittest.main()
