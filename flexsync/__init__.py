"""Shared services for FlexSync tools: settings and logging."""
