"""CLI command groups for songrecords."""
