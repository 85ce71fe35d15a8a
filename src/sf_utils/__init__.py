"""Add Seaflux utility bundles to a local project."""
