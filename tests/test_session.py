import io
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ui import session  # noqa: E402
from ui.presenter import Notice  # noqa: E402


class SessionStateTests(unittest.TestCase):
    def test_init_keeps_existing_values(self):
        state = {session.RESUME_TEXT: "already pasted"}
        session.init_state(state)
        self.assertEqual(state[session.RESUME_TEXT], "already pasted")
        self.assertIsNone(state[session.REPORT])
        self.assertFalse(state[session.ANALYZING])
        self.assertEqual(state[session.NOTICES], [])

    def test_keep_text_preserves_pasted_values(self):
        state = {}
        session.init_state(state)
        state[session.RESUME_TEXT] = "resume"
        state[session.JOB_DESCRIPTION] = "jd"
        session.keep_text(state)
        self.assertEqual((state[session.RESUME_TEXT], state[session.JOB_DESCRIPTION]), ("resume", "jd"))

    def test_reset_discards_report_only(self):
        state = {}
        session.init_state(state)
        state[session.REPORT] = object()
        state[session.JOB_DESCRIPTION] = "JD"
        session.reset(state)
        self.assertIsNone(state[session.REPORT])
        self.assertEqual(state[session.JOB_DESCRIPTION], "JD")

    def test_clear_upload_rotates_uploader_key(self):
        state = {}
        session.init_state(state)
        state[session.FILE_NAME] = "cv.pdf"
        state[session.RESUME_TEXT] = "text"
        before = session.uploader_key(state)

        session.clear_upload(state)

        self.assertNotEqual(session.uploader_key(state), before)
        self.assertEqual(state[session.FILE_NAME], "")
        self.assertEqual(state[session.RESUME_TEXT], "")

    def test_notices_are_drained(self):
        state = {}
        session.init_state(state)
        session.push_notice(state, Notice("A", "first"))
        session.push_notice(state, Notice("B", "second"))
        self.assertEqual([n.title for n in session.pop_notices(state)], ["A", "B"])
        self.assertEqual(session.pop_notices(state), [])


class FakeUpload(io.BytesIO):
    def __init__(self, data: bytes, name: str, type: str):
        super().__init__(data)
        self.name = name
        self.type = type


class ApplyUploadTests(unittest.TestCase):
    def setUp(self):
        self.state = {}
        session.init_state(self.state)

    def test_text_upload_fills_resume_text(self):
        session.apply_upload(self.state, FakeUpload(b"Jane Doe, Python", "cv.txt", "text/plain"))
        self.assertEqual(self.state[session.FILE_NAME], "cv.txt")
        self.assertEqual(self.state[session.RESUME_TEXT], "Jane Doe, Python")
        self.assertEqual([n.title for n in session.pop_notices(self.state)], ["Resume Uploaded"])

    def test_rejected_type_leaves_no_file_name(self):
        self.state[session.RESUME_TEXT] = "pasted earlier"
        session.apply_upload(self.state, FakeUpload(b"\x89PNG", "photo.png", "image/png"))

        self.assertEqual(self.state[session.FILE_NAME], "")
        self.assertEqual(self.state[session.RESUME_TEXT], "pasted earlier")
        notices = session.pop_notices(self.state)
        self.assertEqual(notices[0].title, "Invalid File Type")
        self.assertEqual(notices[0].variant, "error")

    def test_failed_pdf_keeps_file_name_for_clearing(self):
        session.apply_upload(self.state, FakeUpload(b"not a pdf", "cv.pdf", "application/pdf"))
        self.assertEqual(self.state[session.FILE_NAME], "cv.pdf")
        self.assertEqual(session.pop_notices(self.state)[0].variant, "error")

    def test_docx_keeps_pasted_text_and_warns(self):
        self.state[session.RESUME_TEXT] = "pasted"
        docx = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
        session.apply_upload(self.state, FakeUpload(b"PK", "cv.docx", docx))
        self.assertEqual(self.state[session.FILE_NAME], "cv.docx")
        self.assertEqual(self.state[session.RESUME_TEXT], "pasted")

    def test_removed_upload_clears_file_name(self):
        self.state[session.FILE_NAME] = "cv.txt"
        session.apply_upload(self.state, None)
        self.assertEqual(self.state[session.FILE_NAME], "")


if __name__ == "__main__":
    unittest.main()
