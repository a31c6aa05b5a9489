"""Asset map ingestion.

This module reads asset map documents into typed records
and runs them through the source matching transform.
"""
