import streamlit as st
from data import dump_master_data, parse_master_data
from store import MonthStore

def backup_section(store: MonthStore) -> None:
    st.sidebar.header("☁️ Backup")
    st.sidebar.download_button(
        "Download backup", data=dump_master_data(store.months),
        file_name="master_data.json", mime="application/json",
    )
    file = st.sidebar.file_uploader("Restore from backup", type=["json"])
    if file and st.sidebar.button("Replace all data with backup", type="primary"):
        months = parse_master_data(file.getvalue().decode("utf-8", errors="replace"))
        if months is None:
            st.sidebar.error("That file isn't a valid backup, or some of its months can't be read. Nothing was changed.")
            return
        store.replace_all(months)
        st.rerun()
