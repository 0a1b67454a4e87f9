"""Employee register, project staffing, salary calculation and text-file storage."""

__version__ = "0.1.0"
__all__ = ["employee", "workers", "specialists", "managers", "factory", "system", "storage"]