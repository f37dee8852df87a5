"""Demo data for GiftRoom."""
