"""Cross-cutting helpers: configuration, security, logging."""
