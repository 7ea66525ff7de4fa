"""Classifier evaluation harness."""
