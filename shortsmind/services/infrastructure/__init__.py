"""
Infrastructure - generation client, parsing and storage.
"""
