"""Services Layer — imperative shell around the pure core (persistence gateway)."""
