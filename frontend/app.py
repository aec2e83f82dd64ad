"""Streamlit frontend for Parcel Tracker.

Replaceable UI layer: search form, results table and detail panel.
Lookups go through the tracking service only.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from parcel_tracker.domain.tracking import IDENTIFIER_PATTERN
from parcel_tracker.schemas.tracking import render_outcome

# ── Page config (must be first Streamlit call) ─────────────────────────────
st.set_page_config(
    page_title="Parcel Tracker",
    page_icon="📦",
    layout="centered",
)


@st.cache_resource(show_spinner=False)
def _load_service():
    from parcel_tracker.services.tracking_service import get_tracking_service  # noqa: PLC0415

    return get_tracking_service()


# ── Session state defaults ─────────────────────────────────────────────────
_STATE_DEFAULTS: dict = {
    "records": [],
    "error": "",
    "selected": None,
}

for _key, _val in _STATE_DEFAULTS.items():
    if _key not in st.session_state:
        st.session_state[_key] = _val


# ── Search form ────────────────────────────────────────────────────────────
st.title("Parcel Tracker")
st.caption("Shipments in transit for a CPF")

with st.form("search"):
    cpf = st.text_input("CPF", max_chars=11, placeholder="Digits only, e.g. 12345678901")
    submitted = st.form_submit_button("Track", type="primary")

if submitted:
    st.session_state.selected = None
    st.session_state.records = []
    if IDENTIFIER_PATTERN.fullmatch(cpf or "") is None:
        st.session_state.error = "Invalid CPF. It must contain exactly 11 digits."
    else:
        with st.spinner("Querying the carrier page…"):
            status_code, body = render_outcome(_load_service().track(cpf))
        payload = body.model_dump()
        if status_code == 200:
            st.session_state.records = payload["data"]
            st.session_state.error = ""
        else:
            st.session_state.error = payload.get("error") or "Tracking failed."


# ── Helper renderers ───────────────────────────────────────────────────────
def _render_details(record: dict) -> None:
    st.subheader("Shipment details")
    st.markdown(f"**Number:** {record['number']}")
    st.markdown(f"**Date and location:** {record['date_and_location']}")
    st.markdown(f"**Status:** {record['status']}")
    st.markdown(f"**Comments:** {record.get('comments') or 'No additional comments.'}")
    if st.button("Back to list"):
        st.session_state.selected = None
        st.rerun()


def _render_table(records: list[dict]) -> None:
    frame = pd.DataFrame(records, columns=["number", "date_and_location", "status"])
    frame.columns = ["Number", "Date and location", "Status"]
    st.dataframe(frame, use_container_width=True, hide_index=True)

    for index, record in enumerate(records):
        if st.button(f"Details: {record['number']}", key=f"details-{index}"):
            st.session_state.selected = index
            st.rerun()


# ── Main content area ──────────────────────────────────────────────────────
error: str = st.session_state.error
records: list[dict] = st.session_state.records
selected: int | None = st.session_state.selected

if error:
    st.error(error)
elif selected is not None and selected < len(records):
    _render_details(records[selected])
elif records:
    _render_table(records)
else:
    st.info("Enter a CPF to see shipments in transit.")
