import logging
import os
import streamlit as st

logger = logging.getLogger(__name__)


def load_env_vars():
    try:
        secrets = {k: v for k, v in st.secrets.items()}
    except FileNotFoundError:
        logger.info("No secrets.toml found, using environment variables only")
        return
    for k, v in secrets.items():
        if isinstance(v, str):
            os.environ.setdefault(k, v)
