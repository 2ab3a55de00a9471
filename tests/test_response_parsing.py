import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from errors import MalformedResponseError  # noqa: E402
from matching.response import parse_json_payload  # noqa: E402


class ParseJsonPayloadTests(unittest.TestCase):
    def test_raw_json(self):
        self.assertEqual(parse_json_payload('{"a": 1}'), {"a": 1})

    def test_json_tagged_fence(self):
        raw = 'Here you go:\n```json\n{"ATS_Score": {"value": 70}}\n```\nThanks!'
        self.assertEqual(parse_json_payload(raw), {"ATS_Score": {"value": 70}})

    def test_untagged_fence(self):
        raw = '```\n{"error": "too short"}\n```'
        self.assertEqual(parse_json_payload(raw), {"error": "too short"})

    def test_garbage_is_malformed(self):
        with self.assertRaises(MalformedResponseError):
            parse_json_payload("I cannot help with that.")

    def test_non_object_json_is_malformed(self):
        with self.assertRaises(MalformedResponseError):
            parse_json_payload("[1, 2, 3]")


if __name__ == "__main__":
    unittest.main()
