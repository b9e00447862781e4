"""Activity log with notification fan-out for wiki pages."""
