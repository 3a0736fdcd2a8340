"""Rocketlane ingestion."""
