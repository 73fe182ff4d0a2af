"""Database table name constants."""

# Table names, single source of truth for Supabase queries
USERS = "users"
CHIRPS = "chirps"
REFRESH_TOKENS = "refresh_tokens"
