# app.py
# Monthly Budget Dashboard — local JSON persistence with carry-forward months

import streamlit as st

from data import LocalStorage
from helpers import month_label
from store import MonthStore
from ui import (
    month_nav_sidebar, empty_month_section,
    alert_banner, income_section, summary_cards, budget_table_section, category_section,
    charts_section, yearly_section, salary_section, investments_section, backup_section,
)

VIEWS = ["💰 Budget", "🧮 Salary Slip", "📊 Charts", "📈 Investments", "🗓 Yearly"]

st.set_page_config(page_title="Monthly Budget", layout="wide")

if "store" not in st.session_state:
    st.session_state["store"] = MonthStore(LocalStorage())
store: MonthStore = st.session_state["store"]

month_nav_sidebar(store)
view = st.sidebar.radio("View", VIEWS, key="active_view")
backup_section(store)

st.title(f"📒 Monthly Budget — {month_label(store.selected_month)}")

if store.current is None:
    empty_month_section(store)
    st.stop()

alert_banner(store)

if view == "💰 Budget":
    income_section(store)
    summary_cards(store)
    st.markdown("---")
    st.markdown("## Budget items")
    budget_table_section(store)
    category_section(store)
elif view == "🧮 Salary Slip":
    salary_section(store)
elif view == "📊 Charts":
    charts_section(store.current)
elif view == "📈 Investments":
    investments_section(store)
else:
    yearly_section(store)

st.markdown("---")
st.caption("Data is stored locally under ./data/*.json. Use the sidebar to download or restore a backup.")
