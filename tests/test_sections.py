import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ingest.normalize.headings import (  # noqa: E402
    CANONICAL_SECTIONS,
    looks_all_caps,
    normalize_heading,
)
from resume_ingest.normalize.sections import split_sections  # noqa: E402


class HeadingNormalizerTests(unittest.TestCase):
    def test_decoration_is_ignored(self):
        self.assertEqual(normalize_heading("— EXPERIENCE —"), "experience")
        self.assertEqual(normalize_heading("Experience:"), "experience")
        self.assertEqual(normalize_heading("  ■ Technical Skills | "), "skills")

    def test_canonical_names_map_to_themselves(self):
        for name in CANONICAL_SECTIONS:
            if name in {"header", "other"}:
                continue
            with self.subTest(name=name):
                self.assertEqual(normalize_heading(f"• {name.upper()} •"), name)
                self.assertEqual(normalize_heading(f"{name.title()}:"), name)

    def test_localized_dictionary_entries(self):
        self.assertEqual(normalize_heading("Berufserfahrung"), "experience")
        self.assertEqual(normalize_heading("FORMACIÓN ACADÉMICA"), "education")
        self.assertEqual(normalize_heading("Compétences"), "skills")
        self.assertEqual(normalize_heading("Doświadczenie zawodowe"), "experience")
        self.assertEqual(normalize_heading("Samenvatting"), "summary")
        self.assertEqual(normalize_heading("Hobbies"), "other")

    def test_all_caps_keyword_fallback(self):
        self.assertEqual(normalize_heading("WORK EXPERIENCE & PROJECTS"), "experience")
        self.assertEqual(normalize_heading("RELEVANT COURSEWORK / EDUCATION"), "education")
        self.assertEqual(normalize_heading("HONORS AND PRIZES"), "awards")

    def test_dictionary_wins_over_fallback(self):
        # keyword order alone would pick education for "academ"
        self.assertEqual(normalize_heading("ACADEMIC PROJECTS"), "projects")

    def test_fallback_requires_all_caps(self):
        self.assertIsNone(normalize_heading("Work experience and side projects"))

    def test_content_lines_are_not_headings(self):
        self.assertIsNone(normalize_heading("JANE DOE"))
        self.assertIsNone(normalize_heading("Senior Engineer — Acme Inc."))
        self.assertIsNone(normalize_heading("Led the data migration"))
        self.assertIsNone(normalize_heading("React, Node, SQL"))
        self.assertIsNone(normalize_heading("— —"))

    def test_all_caps_bounds(self):
        self.assertFalse(looks_all_caps("AB"))
        self.assertFalse(looks_all_caps("A" * 48))
        self.assertTrue(looks_all_caps("R&D / QA"))
        self.assertFalse(looks_all_caps("SKILLS 2024"))


class SectionSplitterTests(unittest.TestCase):
    SAMPLE = (
        "Jane Doe\n"
        "jane@x.com\n"
        "Summary\n"
        "Engineer who ships.\n"
        "EXPERIENCE\n"
        "Senior Engineer — Acme Inc.\n"
        "- Led a team\n"
        "Skills:\n"
        "Python, SQL\n"
    )

    def test_header_absorbs_lines_before_first_heading(self):
        sections = split_sections(self.SAMPLE)
        self.assertEqual(sections["header"], ["Jane Doe", "jane@x.com"])
        self.assertEqual(sections["summary"], ["Engineer who ships."])
        self.assertEqual(sections["experience"], ["Senior Engineer — Acme Inc.", "- Led a team"])
        self.assertEqual(sections["skills"], ["Python, SQL"])

    def test_every_non_heading_line_kept_once_in_order(self):
        lines = [line for line in self.SAMPLE.splitlines() if line.strip()]
        non_headings = [line for line in lines if normalize_heading(line) is None]
        sections = split_sections(lines)
        flattened = [line for bucket in sections.values() for line in bucket]
        self.assertEqual(flattened, non_headings)

    def test_repeated_heading_appends_to_same_bucket(self):
        sections = split_sections(["Skills", "Python", "Education", "MIT", "Skills", "Go"])
        self.assertEqual(sections["skills"], ["Python", "Go"])
        self.assertEqual(sections["education"], ["MIT"])
        self.assertEqual(sections["header"], [])

    def test_no_headings_keeps_everything_in_header(self):
        sections = split_sections("just one line\n\nand another")
        self.assertEqual(sections, {"header": ["just one line", "and another"]})

    def test_empty_text(self):
        self.assertEqual(split_sections(""), {"header": []})


if __name__ == "__main__":
    unittest.main()
