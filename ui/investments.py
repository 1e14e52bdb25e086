import streamlit as st
import pandas as pd
from helpers import investment_progress
from models import InvestmentDetails
from store import MonthStore

def investments_section(store: MonthStore) -> None:
    details = store.current.investments
    with st.form(f"investments_form::{store.selected_month}"):
        c1, c2 = st.columns(2)
        edu = c1.number_input("Education fund", min_value=0.0, value=float(details.education_fund), step=100000.0)
        ret = c1.number_input("Retirement fund", min_value=0.0, value=float(details.retirement_fund), step=100000.0)
        sav = c1.number_input("General savings", min_value=0.0, value=float(details.general_savings), step=100000.0)
        edu_t = c2.number_input("Education target", min_value=0.0, value=float(details.education_target), step=100000.0)
        ret_t = c2.number_input("Retirement target", min_value=0.0, value=float(details.retirement_target), step=100000.0)
        sav_t = c2.number_input("Savings target", min_value=0.0, value=float(details.savings_target), step=100000.0)
        if st.form_submit_button("Save"):
            store.update_investments(InvestmentDetails(
                education_fund=edu, retirement_fund=ret, general_savings=sav,
                education_target=edu_t, retirement_target=ret_t, savings_target=sav_t,
            ))
            st.rerun()

    rows = investment_progress(details)
    for r in rows:
        st.markdown(f"**{r['fund']}** — {r['current']:,.0f} / {r['target']:,.0f}")
        st.progress(min(r["percent"], 100.0) / 100.0)
    st.dataframe(
        pd.DataFrame(rows).style.format({"current": "{:,.0f}", "target": "{:,.0f}",
                                         "percent": "{:.1f}%", "shortfall": "{:,.0f}"}),
        use_container_width=True, hide_index=True,
    )
