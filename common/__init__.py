"""
Shared pieces for the metadata server: metadata record types and JSON logging.
"""
