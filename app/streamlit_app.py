import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import time

import streamlit as st

from examcolor import config
from examcolor.io_utils import load_table, parse_timeslots, schedule_to_csv_text, schedule_to_frame
from examcolor.models import InvalidInputError, SearchTimeout
from examcolor.scheduling.evaluation import summary
from examcolor.scheduling.pipeline import schedule_exams

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="ExamColor – Scheduler", layout="wide")
st.title("ExamColor – Conflict-free Exam Timeslots")

# ---------------------------------------------------------------------
# Caching
# ---------------------------------------------------------------------
@st.cache_data
def load_table_cached(data: bytes, delimiter: str):
    if data is None:
        return None
    return load_table(io.BytesIO(data), delimiter)

# ---------------------------------------------------------------------
# Form Inputs
# ---------------------------------------------------------------------
with st.form("controls"):
    c1, c2 = st.columns(2)
    courses_file = c1.file_uploader("Courses (course_id,student_id,...)", type=["csv", "txt"])
    students_file = c2.file_uploader("(Optional) Students (student_id,course_id,...)", type=["csv", "txt"])
    slots_text = st.text_input("Timeslots (comma separated)", "Mon AM,Mon PM,Tue AM,Tue PM")
    c3, c4 = st.columns(2)
    delimiter = c3.text_input("Delimiter", config.DELIMITER, max_chars=1)
    use_limit = c4.checkbox("Stop after a time limit", value=False)
    time_limit = c4.number_input("Time limit (sec)", 1.0, 600.0, 60.0, 1.0) if use_limit else None
    submitted = st.form_submit_button("Run Scheduler")

# ---------------------------------------------------------------------
# Run on Submit
# ---------------------------------------------------------------------
if submitted:
    if courses_file is None:
        st.error("Please upload a courses file.")
        st.stop()

    t0 = time.perf_counter()
    try:
        courses = load_table_cached(courses_file.getvalue(), delimiter)
        students = load_table_cached(students_file.getvalue(), delimiter) if students_file else None
        timeslots = parse_timeslots(slots_text)
        run = schedule_exams(courses, timeslots, students=students, time_limit=time_limit)
    except InvalidInputError as e:
        st.error(f"Invalid input: {e}")
        st.stop()
    except SearchTimeout as e:
        st.error(f"Search stopped: {e}")
        st.stop()
    t1 = time.perf_counter()

    st.subheader("Summary")
    st.text(summary(run.graph, run.timeslots, run.result))
    st.caption(f"Total time: {t1 - t0:.3f}s")

    if run.result.feasible:
        st.subheader("Schedule")
        st.dataframe(schedule_to_frame(run.rows), use_container_width=True)
        st.success("Scheduling complete.")
    else:
        st.warning("No conflict-free schedule fits in the given timeslots.")

    st.download_button("Download schedule.csv", schedule_to_csv_text(run.rows),
                       file_name=config.OUT_SCHEDULE, mime="text/csv")
