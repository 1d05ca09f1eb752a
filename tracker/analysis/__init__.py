"""
Analysis module for the infoarena tracker.

Provides timeline aggregation, editorial prompt building, LLM providers and
the tolerant parser for model responses.
"""
