"""Income tax chat assistant."""
