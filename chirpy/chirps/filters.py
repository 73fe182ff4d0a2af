"""Profanity filter for chirp bodies."""

PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


def clean_body(body: str) -> str:
    # Splits on single spaces only: "Fornax!" is left as is.
    words = body.split(" ")
    return " ".join(MASK if word.lower() in PROFANE_WORDS else word for word in words)
