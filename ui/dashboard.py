# ui/dashboard.py
import sys, os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import logging
import streamlit as st
import pandas as pd
from config import configure_logging, load_settings
from errors import AnalyzerError
from matching.analyzer import analyze
from parsers.ingest import UPLOAD_EXTENSIONS
from ui import session
from ui.presenter import COMPARISON_COLUMNS, Notice, notice_for, present

# -------------------- CONFIG --------------------
settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("ui.dashboard")

st.set_page_config(page_title="ResumeSyncAI", page_icon="🧠", layout="wide")

# -------------------- SESSION STATE --------------------
state = st.session_state
session.init_state(state)
session.keep_text(state)


def _notify(notice: Notice):
    icon = {"error": "❌", "warning": "⚠️", "success": "✅"}.get(notice.variant, "ℹ️")
    st.toast(f"**{notice.title}**: {notice.description}", icon=icon)
    body = f"**{notice.title}:** {notice.description}"
    if notice.variant == "error":
        st.error(body)
    elif notice.variant == "warning":
        st.warning(body)
    else:
        st.success(body)


def _on_upload(key: str):
    session.apply_upload(state, state.get(key))


def _start_analysis():
    state[session.ANALYZING] = True


def _new_analysis():
    session.reset(state)


def _run_analysis():
    try:
        with st.spinner("Analyzing with AI..."):
            report = analyze(state[session.RESUME_TEXT], state[session.JOB_DESCRIPTION], settings=settings)
    except AnalyzerError as e:
        session.push_notice(state, notice_for(e))
    except Exception as e:
        logger.exception("Unexpected analysis error")
        session.push_notice(state, notice_for(e))
    else:
        state[session.REPORT] = report
        session.push_notice(
            state, Notice("Analysis Complete!", "Your resume has been analyzed successfully.", "success")
        )
    finally:
        state[session.ANALYZING] = False
    st.rerun()


def render_report(report):
    st.button("⬅️ New Analysis", on_click=_new_analysis)
    for section in present(report).sections:
        with st.container(border=True):
            st.markdown(f"### {section.icon} {section.title}")
            if section.key == "ats_score":
                st.markdown(f"## :{section.color}[{section.text}]")
                st.progress(section.progress)
                st.caption(section.caption)
            elif section.key == "match_percentage":
                st.markdown(f"**{section.text}**")
                st.progress(section.progress)
            elif section.key == "comparison":
                if section.rows:
                    table = pd.DataFrame(list(section.rows), columns=list(COMPARISON_COLUMNS))
                    table.index = range(1, len(table) + 1)
                    st.table(table)
                else:
                    st.caption("No requirements were compared.")
            elif section.items:
                for item in section.items:
                    st.markdown(item)
            else:
                st.write(section.text)


def render_form():
    st.markdown(
        "<h2 style='text-align:center'>Optimize Your Resume with AI</h2>"
        "<p style='text-align:center'>Get instant feedback on ATS compatibility, match scores, "
        "skill gaps, and professional summaries</p>",
        unsafe_allow_html=True,
    )

    with st.container(border=True):
        st.markdown("#### About ResumeSyncAI")
        st.caption(
            "ResumeSyncAI helps you tailor your resume to any job description using AI. It analyzes ATS "
            "compatibility, highlights matching keywords, identifies gaps, and generates an actionable plan to "
            "improve your chances of passing automated screenings. Upload a resume or paste text, add a job "
            "description, and get instant insights with a clean, shareable breakdown."
        )

    features = [
        ("🎯", "Match Analysis", "Get detailed match percentages for each job description"),
        ("📊", "ATS Score", "Optimize for applicant tracking systems"),
        ("📈", "Skill Insights", "Discover skill gaps and recommendations"),
    ]
    for col, (icon, title, blurb) in zip(st.columns(3), features):
        with col, st.container(border=True):
            st.markdown(f"#### {icon} {title}")
            st.caption(blurb)

    # --- Resume ---
    with st.container(border=True):
        st.subheader("📄 Upload Your Resume")
        st.caption("Upload your resume (PDF, DOCX, or TXT) or paste the text below")
        key = session.uploader_key(state)
        st.file_uploader(
            "Click to upload or drag and drop (PDF, DOCX, or TXT, max 10MB)",
            type=UPLOAD_EXTENSIONS,
            key=key,
            on_change=_on_upload,
            args=(key,),
        )
        if state[session.FILE_NAME]:
            st.caption(f"📄 {state[session.FILE_NAME]}")
            st.button(
                "Clear and upload a different file",
                on_click=session.clear_upload,
                args=(state,),
            )
        st.text_area(
            "Or paste resume text:",
            key=session.RESUME_TEXT,
            height=200,
            placeholder="Paste your resume text here...",
        )

    # --- Job description ---
    with st.container(border=True):
        st.subheader("📤 Job Descriptions")
        st.caption("Add a job description to compare against your resume")
        st.text_area(
            "Job Description (Required)",
            key=session.JOB_DESCRIPTION,
            height=120,
            placeholder="Paste job description here...",
        )

    analyzing = state[session.ANALYZING]
    st.button(
        "Analyzing with AI..." if analyzing else "🧠 Analyze Resume",
        type="primary",
        disabled=analyzing,
        on_click=_start_analysis,
    )


# -------------------- PAGE --------------------
st.title("🧠 ResumeSyncAI")

for notice in session.pop_notices(state):
    _notify(notice)

if state[session.REPORT] is not None:
    render_report(state[session.REPORT])
else:
    render_form()
    if state[session.ANALYZING]:
        _run_analysis()

st.divider()
st.caption("ResumeSyncAI · © 2025 ResumeSyncAI — Built with 🧡 by The Saffron Coder")
