from dataclasses import dataclass, field
from datetime import datetime

import models.builds.build_data as build_data


@dataclass
class Build:
    id: str
    name: str
    total_price: int
    created_at: datetime
    components: dict = field(default_factory=dict)

    def to_dict(self):
        return {
            build_data.BUILD_ID: self.id,
            build_data.BUILD_NAME: self.name,
            build_data.BUILD_COMPONENTS: dict(self.components),
            build_data.BUILD_TOTAL_PRICE: self.total_price,
            build_data.BUILD_CREATED_AT: self.created_at.isoformat(),
        }
