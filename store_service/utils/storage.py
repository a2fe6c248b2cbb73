"""
Storage path derivation for file references
"""

import hashlib
import posixpath

from werkzeug.utils import secure_filename

FALLBACK_FILENAME = "file"


def build_storage_path(display_name: str, storage_root: str = "uploads") -> str:
    """
    Derive the storage path of a file from its display name

    The path depends only on ``display_name`` and ``storage_root``, so the
    same name always maps to the same location. A digest of the raw name
    keeps names that sanitize to the same filename apart.

    "report.pdf" maps to "uploads/<2 hex>/<16 hex>-report.pdf".
    """
    digest = hashlib.sha256(display_name.encode("utf-8")).hexdigest()
    filename = secure_filename(display_name) or FALLBACK_FILENAME
    root = storage_root.rstrip("/") or storage_root or "."
    return posixpath.join(root, digest[:2], f"{digest[:16]}-{filename}")
