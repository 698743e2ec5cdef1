"""Search, codec, todo and workspace services."""
