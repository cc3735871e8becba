"""Base repository with common CRUD operations"""
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError
from supabase import Client, PostgrestAPIError  # type: ignore

from app.infra.supabase.errors import StoreError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)

RecordId = Union[int, str]


class BaseRepository(Generic[T, CreateT, UpdateT]):
    """
    Base repository providing common database operations.
    Hides Supabase implementation details from the rest of the application.
    Every PostgREST or transport failure surfaces as StoreError.
    """

    def __init__(self, client: Client, table_name: str, model_class: Type[T]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class

    def _table(self):
        return self._client.table(self._table_name)

    def _execute(self, query, action: str):
        """Run a query, translating client errors into StoreError"""
        try:
            return query.execute()
        except PostgrestAPIError as e:
            message = getattr(e, "message", None) or str(e)
            logger.error(f"Failed to {action} on {self._table_name}: {message}")
            raise StoreError(message) from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to {action} on {self._table_name}: {e}")
            raise StoreError(str(e)) from e

    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert database dict to domain model"""
        return self._model_class(**data)

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        """Convert database dicts to domain models, skipping malformed rows"""
        models = []
        for item in data:
            try:
                models.append(self._to_model(item))
            except ValidationError as e:
                logger.warning(
                    f"Skipping malformed {self._table_name} row {item.get('id')}: "
                    f"{e.error_count()} validation error(s)"
                )
        return models

    async def find_by_id(self, id: RecordId) -> Optional[T]:
        """Find a single record by ID"""
        response = self._execute(self._table().select("*").eq("id", id), "select")

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def find_all(self, order_by: Optional[str] = None, desc: bool = False) -> List[T]:
        """Find all records, optionally ordered by a column"""
        query = self._table().select("*")

        if order_by:
            query = query.order(order_by, desc=desc)

        response = self._execute(query, "select")
        return self._to_models(response.data or [])

    async def create(self, data: CreateT) -> T:
        """Create a new record"""
        data_dict = data.model_dump(mode='json')
        response = self._execute(self._table().insert(data_dict), "insert")

        if not response.data:
            raise StoreError("Failed to create record")

        return self._to_model(response.data[0])

    async def update(self, id: RecordId, data: UpdateT) -> Optional[T]:
        """Update a record by ID, returning None if it does not exist"""
        data_dict = data.model_dump(mode='json')
        response = self._execute(self._table().update(data_dict).eq("id", id), "update")

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def delete(self, id: RecordId) -> bool:
        """Delete a record by ID"""
        response = self._execute(self._table().delete().eq("id", id), "delete")
        return bool(response.data)
