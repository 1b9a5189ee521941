"""
UI testing layer: framework helpers, page objects, test data and scenarios.
"""
