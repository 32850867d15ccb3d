"""Registration pipeline: sanitizer, field validators and service."""
