"""Streamlit components for the harvest dashboard."""
