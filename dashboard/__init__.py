"""Dashboard package namespace.

This package contains the Streamlit page and its components. Components
keep their formatting and row-building logic in plain functions so they can
be tested without a running Streamlit server; the `render_*` functions draw
the results.
"""
