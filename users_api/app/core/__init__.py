"""
Cross‑cutting application concerns: settings and logging.
"""
