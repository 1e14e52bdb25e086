import streamlit as st
import pandas as pd
from config import CURRENCY
from helpers import (
    category_totals, overall_totals, remaining_balance,
    parse_amount, format_amount, validate_category_name,
)
from store import MonthStore

def alert_banner(store: MonthStore) -> None:
    for alert in store.alerts():
        c1, c2 = st.columns([6, 1])
        msg = f"**{alert.category}** is at {alert.ratio:.0%} of its budget."
        with c1:
            if alert.severity == "critical":
                st.error(f"🚨 {msg}")
            else:
                st.warning(f"⚠️ {msg}")
        if c2.button("Dismiss", key=f"dismiss::{store.selected_month}::{alert.category}"):
            store.dismiss_alert(alert.category)
            st.rerun()

def income_section(store: MonthStore) -> None:
    snap = store.current
    raw = st.text_input(
        f"Net income / take-home pay ({CURRENCY})",
        value=format_amount(snap.income),
        key=f"income::{store.selected_month}",
    )
    amount = parse_amount(raw)
    if amount != snap.income:
        store.set_income(amount)
        st.rerun()

def summary_cards(store: MonthStore) -> None:
    snap = store.current
    total_budget, total_actual = overall_totals(snap)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Income", f"{CURRENCY} {format_amount(snap.income)}")
    c2.metric("Planned", f"{CURRENCY} {format_amount(total_budget)}")
    c3.metric("Spent", f"{CURRENCY} {format_amount(total_actual)}")
    c4.metric("Remaining", f"{CURRENCY} {format_amount(remaining_balance(snap))}")

def _save_edits(store: MonthStore, before: pd.DataFrame, after: pd.DataFrame) -> int:
    changes = 0
    for item_id, row in after.iterrows():
        if item_id not in before.index:
            continue
        for field in ("name", "budget", "actual"):
            new = row[field]
            if pd.isna(new):
                continue
            if field == "name":
                new = str(new).strip()
                if not new:
                    st.warning("Item name cannot be empty.")
                    continue
            else:
                new = float(new)
            if new == before.at[item_id, field]:
                continue
            store.update_item(item_id, field, new)
            changes += 1
    return changes

def budget_table_section(store: MonthStore) -> None:
    snap = store.current
    month = store.selected_month
    for category in snap.categories:
        total_budget, total_actual = category_totals(snap, category)
        title = f"{category} — {CURRENCY} {format_amount(total_actual)} / {format_amount(total_budget)}"
        with st.expander(title, expanded=True):
            items = [i for i in snap.items if i.category == category]
            if items:
                df = pd.DataFrame(
                    [{"id": i.id, "name": i.name, "budget": i.budget, "actual": i.actual} for i in items]
                ).set_index("id")
                edited = st.data_editor(
                    df, use_container_width=True, hide_index=True,
                    key=f"items::{month}::{category}",
                    column_config={
                        "name": st.column_config.TextColumn("Item"),
                        "budget": st.column_config.NumberColumn("Budget", min_value=0.0, step=1000.0),
                        "actual": st.column_config.NumberColumn("Actual", min_value=0.0, step=1000.0),
                    },
                )
                if _save_edits(store, df, edited):
                    st.rerun()

                del_id = st.selectbox(
                    "Remove item", options=[""] + [i.id for i in items],
                    format_func=lambda v: next((i.name for i in items if i.id == v), "—"),
                    key=f"del_item::{month}::{category}",
                )
                if del_id and st.button("Remove selected item", key=f"del_btn::{month}::{category}"):
                    store.remove_item(del_id)
                    st.rerun()
            else:
                st.info("No items in this category.")

            with st.form(f"add_item::{month}::{category}", clear_on_submit=True):
                c1, c2, c3 = st.columns([2, 1, 1])
                name = c1.text_input("New item")
                budget = c2.number_input("Budget", min_value=0.0, value=0.0, step=1000.0)
                actual = c3.number_input("Actual", min_value=0.0, value=0.0, step=1000.0)
                if st.form_submit_button("Add item"):
                    if not name.strip():
                        st.warning("Item name cannot be empty.")
                    else:
                        store.add_item(name.strip(), category, budget=budget, actual=actual)
                        st.rerun()

            if st.button(f"Delete category '{category}' and its items", key=f"del_cat::{month}::{category}"):
                store.remove_category(category)
                st.rerun()

def category_section(store: MonthStore) -> None:
    with st.form(f"add_category::{store.selected_month}", clear_on_submit=True):
        name = st.text_input("New category")
        if st.form_submit_button("Add category"):
            problem = validate_category_name(name, store.current.categories)
            if problem:
                st.warning(problem)
            else:
                store.add_category(name)
                st.rerun()
