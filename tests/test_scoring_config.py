import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ingest.core.config import load_settings  # noqa: E402
from resume_ingest.core.config.scoring import get_scoring_config, get_scoring_value  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_rubric_points(self):
        self.assertEqual(get_scoring_value("ats.points.personal"), 25)
        self.assertEqual(get_scoring_value("ats.points.section_cap"), 20)
        self.assertEqual(get_scoring_value("ats.thresholds.max_avg_bullet_chars"), 160)

    def test_lists_are_loaded(self):
        self.assertEqual(get_scoring_value("ats.required_personal_fields"), ["full_name", "email", "phone"])
        self.assertEqual(len(get_scoring_value("ats.action_verbs")), 12)
        self.assertEqual(len(get_scoring_value("ats.sections")), 8)

    def test_missing_path_returns_default(self):
        self.assertEqual(get_scoring_value("ats.points.unknown", 7), 7)
        self.assertEqual(get_scoring_value("ats.points.personal.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))

    def test_config_is_cached(self):
        self.assertIs(get_scoring_config(), get_scoring_config())


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
        self.assertEqual(settings.min_text_chars, 20)
        self.assertEqual(settings.ocr_language, "eng")
        self.assertEqual(settings.ocr_dpi, 300)
        self.assertEqual(settings.ocr_max_pages, 10)
        self.assertEqual(settings.keyword_limit, 15)

    def test_environment_overrides(self):
        env = {"MIN_TEXT_CHARS": "50", "OCR_LANGUAGE": "spa", "KEYWORD_LIMIT": "not-a-number"}
        with patch.dict(os.environ, env, clear=True):
            settings = load_settings()
        self.assertEqual(settings.min_text_chars, 50)
        self.assertEqual(settings.ocr_language, "spa")
        self.assertEqual(settings.keyword_limit, 15)


if __name__ == "__main__":
    unittest.main()
