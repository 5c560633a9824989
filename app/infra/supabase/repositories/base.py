"""Base repository with common CRUD operations"""
from typing import Generic, TypeVar, Type, Optional, List, Dict, Any, Union
from pydantic import BaseModel
from supabase import Client

T = TypeVar('T', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)

RecordId = Union[int, str]


class BaseRepository(Generic[T, CreateT]):
    """
    Base repository providing common database operations.
    Hides Supabase implementation details from the rest of the application.

    Nested JSON documents are written with their field aliases so that the
    stored shape matches what the API returns.
    """

    def __init__(self, client: Client, table_name: str, model_class: Type[T]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class

    def _to_model(self, data: Dict[str, Any]) -> T:
        """Convert database dict to domain model"""
        return self._model_class.model_validate(data)

    def _to_models(self, data: List[Dict[str, Any]]) -> List[T]:
        """Convert list of database dicts to domain models"""
        return [self._to_model(item) for item in data]

    @staticmethod
    def _dump(data: BaseModel) -> Dict[str, Any]:
        return data.model_dump(mode='json', by_alias=True)

    async def find_by_id(self, id: RecordId) -> Optional[T]:
        """Find a single record by ID"""
        response = self._client.table(self._table_name).select("*").eq("id", id).execute()

        if not response.data:
            return None

        return self._to_model(response.data[0])

    async def find_by_filters(
        self,
        filters: Dict[str, Any],
        limit: Optional[int] = None,
        order_by: Optional[str] = None,
        desc: bool = False,
    ) -> List[T]:
        """Find records matching filters, optionally ordered by one column"""
        query = self._client.table(self._table_name).select("*")

        for key, value in filters.items():
            query = query.eq(key, value)

        if order_by:
            query = query.order(order_by, desc=desc)

        if limit:
            query = query.limit(limit)

        response = query.execute()
        return self._to_models(response.data)

    async def create(self, data: CreateT) -> T:
        """Create a new record"""
        response = self._client.table(self._table_name).insert(self._dump(data)).execute()

        if not response.data:
            raise ValueError("Failed to create record")

        return self._to_model(response.data[0])
