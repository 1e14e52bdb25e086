import streamlit as st
from config import CURRENCY
from helpers import compute_salary_slip, format_amount
from models import SalaryDetails
from store import MonthStore

def salary_section(store: MonthStore) -> None:
    details = store.current.salary_slip
    st.markdown("### Salary inputs")
    with st.form(f"salary_form::{store.selected_month}"):
        c1, c2 = st.columns(2)
        basic = c1.number_input("Basic salary", min_value=0.0, value=float(details.basic_salary), step=100000.0)
        shift = c1.number_input("Shift allowance", min_value=0.0, value=float(details.shift_allowance), step=10000.0)
        housing = c1.number_input("Housing allowance", min_value=0.0, value=float(details.housing_allowance), step=10000.0)
        ot_hours = c2.text_input("Overtime hours", value=details.ot_hours_str)
        tax_rate = c2.text_input("Tax rate (%)", value=details.tax_rate_str)
        bonus = c2.text_input("Bonus multiplier (x basic)", value=details.bonus_multiplier_str)
        other = c1.number_input("Other deductions", min_value=0.0, value=float(details.other_deductions), step=10000.0)
        if st.form_submit_button("Save"):
            store.update_salary_slip(SalaryDetails(
                basic_salary=basic, shift_allowance=shift, housing_allowance=housing,
                ot_hours_str=ot_hours.strip(), tax_rate_str=tax_rate.strip(),
                other_deductions=other, bonus_multiplier_str=bonus.strip(),
            ))
            st.rerun()

    slip = compute_salary_slip(details)
    st.markdown("### Slip")
    rows = [
        ("Overtime pay", slip.overtime_pay),
        ("Gross", slip.gross),
        ("Bonus", slip.bonus),
        ("Tax", -slip.tax),
        ("Other deductions", -slip.deductions),
    ]
    for label, value in rows:
        st.markdown(f"{label}: **{CURRENCY} {format_amount(value)}**")
    st.metric("Take-home pay", f"{CURRENCY} {format_amount(slip.take_home)}")
    if st.button("Use as this month's income"):
        store.set_income(max(round(slip.take_home), 0))
        st.rerun()
