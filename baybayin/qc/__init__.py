"""Quality checks on converted output."""
