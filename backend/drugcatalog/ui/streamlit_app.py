"""
Drug Information Database - Streamlit frontend.

Run with: streamlit run backend/drugcatalog/ui/streamlit_app.py
"""
import asyncio

import streamlit as st

from drugcatalog.config import get_settings
from drugcatalog.schemas.filters import ALL_COMPANIES
from drugcatalog.ui.drug_table import CatalogClient, DrugTable, TableState

COLUMNS = {"id": "ID", "code": "Code", "name": "Name", "company": "Company", "launchDate": "Launch Date"}

st.set_page_config(
    page_title="Drug Information Database",
    page_icon="💊",
    layout="wide",
)


def get_table() -> DrugTable:
    if "drug_table" not in st.session_state:
        settings = get_settings()
        table = DrugTable(client=CatalogClient(settings.api_base_url, timeout=settings.api_timeout))
        with st.spinner("Loading drugs..."):
            asyncio.run(table.mount())
        st.session_state.drug_table = table
    return st.session_state.drug_table


def on_company_change():
    table = st.session_state.drug_table
    with st.spinner("Loading drugs..."):
        asyncio.run(table.select_company(st.session_state.company_filter))


table = get_table()

if table.state == TableState.ERROR:
    st.error(table.error)
    st.stop()

st.title("Drug Information Database")

st.selectbox(
    "Filter by Company",
    options=[ALL_COMPANIES] + table.companies,
    format_func=lambda value: "All Companies" if value == ALL_COMPANIES else value,
    key="company_filter",
    on_change=on_company_change,
    disabled=table.loading,
)

if table.state == TableState.LOADED:
    st.caption(table.status_line())
    st.dataframe(
        [{label: drug.get(key) for key, label in COLUMNS.items()} for drug in table.drugs],
        hide_index=True,
        use_container_width=True,
        height=600,
    )
