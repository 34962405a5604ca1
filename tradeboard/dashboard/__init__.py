"""
Dashboard package.

Filter parsing, the per-session view-model and the chart builders
used by the Streamlit app in streamlit_app.py.
"""
