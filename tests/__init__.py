"""Test suite for map-wikipedia."""
