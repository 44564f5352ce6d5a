"""agwire - typed message and event schema for agent run payloads."""
