"""BlueNet navigation bar: state model, session glue and Streamlit rendering."""
