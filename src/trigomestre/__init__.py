"""TrigoMestre: triangle solver and trigonometry exercise generator."""
