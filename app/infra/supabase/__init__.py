"""Supabase infrastructure module"""
from .client import get_supabase_client, reset_supabase_client
from .errors import StoreError, TaskNotFoundError

__all__ = ['get_supabase_client', 'reset_supabase_client', 'StoreError', 'TaskNotFoundError']
