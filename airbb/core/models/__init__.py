"""Core models: booking domain rules and API I/O schemas."""
