"""
HTTP controllers (Flask blueprints).
"""
