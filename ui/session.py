import logging
from typing import List, MutableMapping

from errors import AnalyzerError, UnsupportedTypeError
from parsers.ingest import PDF, ingest
from ui.presenter import Notice, notice_for

logger = logging.getLogger(__name__)

# Keys owned by the dashboard page; `state` is st.session_state in the app
# and a plain dict in tests.
REPORT = "report"
RESUME_TEXT = "resume_text"
JOB_DESCRIPTION = "job_description"
FILE_NAME = "file_name"
ANALYZING = "analyzing"
UPLOADER_NONCE = "uploader_nonce"
NOTICES = "notices"

DEFAULTS = {
    REPORT: None,
    RESUME_TEXT: "",
    JOB_DESCRIPTION: "",
    FILE_NAME: "",
    ANALYZING: False,
    UPLOADER_NONCE: 0,
}


def init_state(state: MutableMapping) -> None:
    for key, value in DEFAULTS.items():
        if key not in state:
            state[key] = value
    if NOTICES not in state:
        state[NOTICES] = []


def keep_text(state: MutableMapping) -> None:
    """
    Re-assign the text-area values so Streamlit keeps them while the report
    is shown and the widgets are not rendered.
    """
    for key in (RESUME_TEXT, JOB_DESCRIPTION):
        state[key] = state[key]


def reset(state: MutableMapping) -> None:
    """Discard the current report so a new analysis can start."""
    state[REPORT] = None


def clear_upload(state: MutableMapping) -> None:
    state[FILE_NAME] = ""
    state[RESUME_TEXT] = ""
    # a fresh widget key empties the file uploader
    state[UPLOADER_NONCE] = state.get(UPLOADER_NONCE, 0) + 1


def uploader_key(state: MutableMapping) -> str:
    return f"resume_upload_{state.get(UPLOADER_NONCE, 0)}"


def push_notice(state: MutableMapping, notice) -> None:
    state.setdefault(NOTICES, []).append(notice)


def pop_notices(state: MutableMapping) -> List:
    notices = list(state.get(NOTICES) or [])
    state[NOTICES] = []
    return notices


def apply_upload(state: MutableMapping, upload) -> None:
    """Ingest a newly selected file into the page state and queue a notice."""
    if upload is None:
        state[FILE_NAME] = ""
        return
    try:
        result = ingest(upload)
    except UnsupportedTypeError as e:
        logger.info(f"Upload rejected: {e.media_type!r}")
        state[FILE_NAME] = ""
        push_notice(state, notice_for(e))
        return
    except AnalyzerError as e:
        logger.info(f"Upload not extracted: {type(e).__name__}")
        state[FILE_NAME] = getattr(upload, "name", "") or ""
        push_notice(state, notice_for(e))
        return

    state[FILE_NAME] = result.file_name
    if result.warning:
        push_notice(state, Notice("Resume Uploaded", result.warning, "success"))
        return
    state[RESUME_TEXT] = result.text
    what = "PDF text" if result.media_type == PDF else "Text"
    push_notice(state, Notice("Resume Uploaded", f"{what} extracted successfully!", "success"))
