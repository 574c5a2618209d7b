"""ショッピングカート."""
