"""HTTP interface for customers, categories and books."""
