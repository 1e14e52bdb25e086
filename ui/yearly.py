import streamlit as st
from helpers import yearly_summary, year_of
from store import MonthStore

def yearly_section(store: MonthStore) -> None:
    year = year_of(store.selected_month)
    g = yearly_summary(store.months, year)
    if not g["has_data"].any():
        st.info(f"No months recorded for {year}.")
        return

    st.subheader(f"📈 {year} at a glance")
    c1, c2, c3 = st.columns(3)
    c1.metric("Income", f"{g['income'].sum():,.0f}")
    c2.metric("Spent", f"{g['actual'].sum():,.0f}")
    c3.metric("Saved", f"{g['balance'].sum():,.0f}")

    st.line_chart(g.set_index("month")[["income", "budget", "actual"]])
    st.dataframe(
        g.style.format({c: "{:,.0f}" for c in ["income", "budget", "actual", "balance"]}),
        use_container_width=True, hide_index=True,
    )
