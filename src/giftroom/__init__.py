"""GiftRoom backend: rooms of gift-exchange participants."""
