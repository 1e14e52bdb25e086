import streamlit as st
from helpers import month_label
from store import MonthStore

def month_nav_sidebar(store: MonthStore) -> None:
    st.sidebar.header("📅 Month")
    c1, c2, c3 = st.sidebar.columns([1, 3, 1])
    if c1.button("◀", key="nav_prev"):
        store.navigate(-1)
        st.rerun()
    c2.markdown(f"**{month_label(store.selected_month)}**")
    if c3.button("▶", key="nav_next"):
        store.navigate(+1)
        st.rerun()

def empty_month_section(store: MonthStore) -> None:
    """Shown when the selected month has no snapshot yet."""
    st.markdown(f"### No data for {month_label(store.selected_month)} yet")
    st.caption("Choose how to start this month's budget.")

    prev_key = store.find_previous_month()
    if prev_key:
        if st.button(f"📋 Copy from previous month ({prev_key})", type="primary", use_container_width=True):
            store.init_new_month(copy_from=prev_key)
            st.rerun()
    if st.button("🆕 Start from defaults", use_container_width=True):
        store.init_new_month()
        st.rerun()
