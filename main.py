#!/usr/bin/env python3
"""
Main entry point for the 4C cost model.
Run with: streamlit run main.py
"""

import logging

from fourc.ui.main_ui import main

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

if __name__ == "__main__":
    main()
