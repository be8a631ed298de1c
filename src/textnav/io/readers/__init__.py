"""File readers returning text exactly as stored."""
