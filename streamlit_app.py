"""Entry script for ``streamlit run streamlit_app.py``."""

from dice_dash.ui.app import main

main()
