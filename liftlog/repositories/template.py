from typing import List

from liftlog.data.seed import SEED_TEMPLATES
from liftlog.models.template import Template
from liftlog.repositories.base import CollectionRepository
from liftlog.repositories.errors import TemplateRepoError
from liftlog.utils.db import CollectionKey


class StoreTemplateRepository(CollectionRepository[Template]):
    key = CollectionKey.TEMPLATES
    model = Template
    error_cls = TemplateRepoError

    def _default_items(self) -> list[dict]:
        return SEED_TEMPLATES

    def get_for_location(self, location_id: str) -> List[Template]:
        return [t for t in self.get_all() if t.location_id == location_id]

    def get_by_type(self, template_type: str) -> List[Template]:
        return [t for t in self.get_all() if t.type == template_type]
