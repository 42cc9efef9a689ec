"""Configuration: TOML sections, discovery, unified settings, and logging."""
