from .reader import read_project_metadata

__all__ = ["read_project_metadata"]
