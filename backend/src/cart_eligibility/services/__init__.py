"""Eligibility services built on the rule primitives."""
