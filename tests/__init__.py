"""
Quote Service Test Suite
========================

This package contains tests for the Quote Service including:
- Unit tests for the store, API routes and utilities
- Integration tests for concurrent access through the HTTP layer
"""
