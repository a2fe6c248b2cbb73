from .records import Base, Account, FileReference

__all__ = ["Base", "Account", "FileReference"]
