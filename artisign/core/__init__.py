"""Core signing machinery: hashing, classification, matching, signing."""
