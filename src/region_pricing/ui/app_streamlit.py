"""
Streamlit UI for region pricing.

Features:
- Case tab: the price list table for the contact behind a case, or an error banner
- Bulk tab: paste customer UUIDs, see priced customers and itemized errors
- System tab: active data files and settings
"""
import logging

import streamlit as st
import pandas as pd

from region_pricing.api.state import build_services
from region_pricing.config.settings import get_settings
from region_pricing.engine.errors import ContractViolation
from region_pricing.services.bulk_lookup import split_ids
from region_pricing.ui.tables import pricing_table
from region_pricing.utils.logger import setup_logging

logger = logging.getLogger(__name__)

NO_COUNTRY_DATA = "No pricing data found for the selected country."
RETRIEVAL_ERROR = "An error occurred while retrieving data. Please try again later."


st.set_page_config(
    page_title="Product Pricing",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_services_cached():
    """Get cached lookup services."""
    return build_services()


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


try:
    settings = get_settings_cached()
    setup_logging(settings.log_level)
    services = get_services_cached()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SIDEBAR: Case Context
# ============================================================================
with st.sidebar:
    st.header("📁 Case Context")
    with st.container(border=True):
        case_id = st.text_input("Case Reference", value="", key="case_input")


st.title("Product Pricing")
st.caption(f"v1.0 | Data: {settings.data_dir}")

tab1, tab2, tab3 = st.tabs(["💶 Case Pricing", "📋 Bulk Lookup", "📊 System"])


# ============================================================================
# TAB 1: CASE PRICING
# ============================================================================
with tab1:
    if not case_id.strip():
        st.info("Enter a case reference in the sidebar to see the contact's price list.")
    else:
        try:
            response = services.single.get_pricing(case_id).to_dict()
        except ContractViolation as e:
            st.error(str(e))
            response = None
        except Exception:
            logger.exception("Case pricing lookup failed")
            st.error(RETRIEVAL_ERROR)
            response = None

        if response is not None:
            if response['errorMessage']:
                st.error(response['errorMessage'])
            else:
                table = pricing_table(response['pricingData'])
                if table.empty:
                    st.warning(NO_COUNTRY_DATA)
                else:
                    st.dataframe(table, use_container_width=True, hide_index=True)


# ============================================================================
# TAB 2: BULK LOOKUP
# ============================================================================
with tab2:
    st.caption("Paste customer UUIDs, comma separated or one per line:")
    bulk_text = st.text_area(
        "Customer UUIDs",
        height=120,
        label_visibility="collapsed"
    )

    if st.button("Look Up Pricing", type="primary"):
        ids = split_ids(bulk_text.replace('\n', ','))
        response = services.bulk.get_pricing_bulk(ids).to_dict()

        if response['success']:
            st.success(response['message'])
        else:
            st.error(response['message'])

        success_data = response.get('successData') or {}
        for external_id, item in success_data.items():
            st.markdown(f"##### {item['contactName']} `{external_id}`")
            st.dataframe(pricing_table(item['pricingData']), use_container_width=True, hide_index=True)

        errors = response.get('errors') or {}
        if errors and response['success']:
            st.subheader("Errors")
            st.dataframe(
                pd.DataFrame([{'UUID': k, 'Error': v} for k, v in errors.items()]),
                use_container_width=True,
                hide_index=True
            )


# ============================================================================
# TAB 3: SYSTEM INFO
# ============================================================================
with tab3:
    st.header("System Status")
    files = {
        'Products': settings.products_csv,
        'Price Catalogs': settings.price_catalogs_csv,
        'Price Entries': settings.price_entries_csv,
        'Contacts': settings.contacts_csv,
        'Cases': settings.cases_csv,
        'Error Log': settings.error_log,
    }
    st.dataframe(pd.DataFrame([
        {'Data': name, 'Path': str(path), 'Present': path.exists()}
        for name, path in files.items()
    ]), use_container_width=True, hide_index=True)

    c1, c2 = st.columns(2)
    c1.metric("Report Unpriced UUIDs", "Yes" if settings.report_unpriced_ids else "No")
    c2.metric("Expose Fault Detail (Bulk)", "Yes" if settings.expose_fault_detail else "No")
