"""Tests for the credential service: HTTP endpoints, credential flow, repositories and startup."""
