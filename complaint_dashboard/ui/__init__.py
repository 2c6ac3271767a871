"""Streamlit surface for the complaint dashboard."""
