from typing import Type, TypeVar, Generic, Iterable, List, Optional
from django.db import models

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Thin ORM gateway shared by the app repositories."""

    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def create(self, **data) -> T:
        return self.model.objects.create(**data)

    def bulk_create(self, objs: Iterable[T]) -> List[T]:
        return self.model.objects.bulk_create(list(objs))

    def update(self, obj: T, **data) -> T:
        for k, v in data.items():
            setattr(obj, k, v)
        obj.save()
        return obj
