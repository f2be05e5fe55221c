import json
import os

import streamlit as st
from dotenv import load_dotenv

from modern_timeline import (
    JsonBuilder,
    TimelineError,
    TimelineOptions,
    dumps_timeline,
    parse_rows_to_subjects,
)
from modern_timeline.logging_config import setup_logging

load_dotenv()


@st.cache_data(ttl=300)
def load_rows_from_disk(path: str):
    """Read exported query result rows from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return _unwrap_results(json.load(f))


def _unwrap_results(data):
    if isinstance(data, dict):
        return data.get("results", [])
    return data


def build_document(rows, options: TimelineOptions):
    builder = JsonBuilder(options.new_presenter(), options.new_extractor())
    return builder.build_timeline_json(parse_rows_to_subjects(rows))


def main():
    setup_logging(verbose=os.getenv("MODERN_TIMELINE_DEBUG") == "1")

    st.set_page_config(
        page_title="Timeline",
        page_icon="📅",
        layout="wide"
    )

    try:
        options = TimelineOptions.from_env()
    except TimelineError as e:
        st.error(f"Invalid timeline configuration: {e}")
        st.stop()

    uploaded = st.file_uploader("Query results (JSON)", type=["json"])

    results_path = os.getenv("MODERN_TIMELINE_RESULTS_PATH")
    if uploaded is None and not results_path:
        st.info("Upload query results or set MODERN_TIMELINE_RESULTS_PATH.")
        st.stop()

    try:
        if uploaded is not None:
            rows = _unwrap_results(json.load(uploaded))
        else:
            rows = load_rows_from_disk(results_path)
    except (OSError, ValueError) as e:
        st.error(f"Error reading query results: {e}")
        st.stop()

    with st.spinner("Building timeline…"):
        try:
            document = build_document(rows, options)
        except TimelineError as e:
            st.error(f"Error building timeline: {e}")
            st.stop()

    if not document["events"]:
        st.warning("No events found in the query results.")
        st.stop()

    st.caption(f"{len(document['events'])} events")
    with st.container(height=options.height):
        st.json({
            "events": document["events"],
            "options": options.to_widget_options(),
            "container": options.container_size(),
        })
    st.download_button(
        "⬇️ Download timeline JSON",
        data=dumps_timeline(document),
        file_name="timeline.json",
        mime="application/json",
    )


if __name__ == "__main__":
    main()
