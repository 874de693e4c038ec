"""
Hosted table store clients.

Currently supported backends:
- PostgREST (the REST layer used by Supabase)
"""

from services.remote_store.base import RemoteStoreError, RemoteTable, Row
from services.remote_store.postgrest import PostgrestStore, PostgrestTable

__all__ = [
    "RemoteStoreError",
    "RemoteTable",
    "Row",
    "PostgrestStore",
    "PostgrestTable",
]
