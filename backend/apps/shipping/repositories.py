from apps.common.repository import GenericRepository
from .models import ShippingZone


class ShippingZoneRepository(GenericRepository[ShippingZone]):
    def __init__(self):
        super().__init__(ShippingZone)

    def get_by_region(self, region_code: str):
        return self.get(region_code=region_code)
