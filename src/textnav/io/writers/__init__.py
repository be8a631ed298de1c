"""File writers persisting text without modification."""
