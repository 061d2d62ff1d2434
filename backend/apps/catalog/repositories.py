from apps.common.repository import GenericRepository
from .models import Product


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def _active(self):
        return self.model.objects.filter(is_active=True).prefetch_related(
            "bundle_options"
        )

    def list_active(self, category: str = None):
        qs = self._active()
        if category:
            qs = qs.filter(category__iexact=category)
        return qs

    def get_active(self, product_id):
        return self._active().filter(id=product_id).first()
