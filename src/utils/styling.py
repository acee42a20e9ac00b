import streamlit as st

SIDEBAR_CUSTOM_CSS = """
<style>
section[data-testid="stSidebar"] {
    min-width: 240px;
    width: fit-content;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"] {
    font-size: 16px;
    font-weight: 500;
    padding: 12px 8px;
    border-radius: 8px;
    margin-bottom: 4px;
    width: 100%;
    display: block;
    box-sizing: border-box;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] label[data-baseweb="radio"] > div:first-child {
    display: none;
}

section[data-testid="stSidebar"] label[data-testid="stWidgetLabel"] {
    display: none;
}

section[data-testid="stSidebar"] .stRadio > div[role='radiogroup'] > label[data-baseweb="radio"]:has(input:checked) {
    background: #1f1147;
}
</style>
"""

MOOD_PICKER_CSS = """
<style>
div[role="dialog"] [data-testid="stPills"] button {
    font-size: 28px;
    min-width: 52px;
    min-height: 52px;
}

div[role="dialog"] [data-testid="stPills"] button[aria-checked="true"],
div[role="dialog"] [data-testid="stPills"] button[kind="pillsActive"] {
    box-shadow: 0 0 0 3px #a855f7;
}
</style>
"""


def load_custom_css():
    st.markdown(SIDEBAR_CUSTOM_CSS, unsafe_allow_html=True)
    st.markdown(MOOD_PICKER_CSS, unsafe_allow_html=True)
