import streamlit as st
from helpers import category_breakdown
from models import MonthlyBudget

def charts_section(snap: MonthlyBudget) -> None:
    df = category_breakdown(snap)
    if df.empty or not (df["budget"].sum() or df["actual"].sum()):
        st.info("Enter some budgets or spending to see charts.")
        return

    st.subheader("📊 Budget vs Actual by Category")
    st.bar_chart(df.set_index("category")[["budget", "actual"]])

    st.subheader("Spending share")
    share = df.loc[df["actual"] > 0, ["category", "actual"]].copy()
    if not share.empty:
        share["share %"] = share["actual"] / share["actual"].sum() * 100.0
        st.dataframe(share.style.format({"actual": "{:,.0f}", "share %": "{:.1f}%"}),
                     use_container_width=True, hide_index=True)

    st.dataframe(
        df.style.format({"budget": "{:,.0f}", "actual": "{:,.0f}", "remaining": "{:,.0f}", "ratio": "{:.0%}"}),
        use_container_width=True, hide_index=True,
    )
