"""
krokiprep.utils – Small shared utilities (reference classification, formats).
"""
from .paths import classify_reference, is_library_reference, is_remote_url

__all__ = ["classify_reference", "is_library_reference", "is_remote_url"]
