"""Application layer – search option translation and result assembly."""
