"""Path domain: kind, grammar, normalizer, value type and errors."""
