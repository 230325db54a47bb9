import logging
from dataclasses import replace
from datetime import datetime
from uuid import uuid4

import pytz
from database.builder_models.Build import Build

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True

UPDATABLE_FIELDS = ("name", "components", "total_price")


class BuildStore:
    """
    In-memory store of saved builds. There is no delete path.
    """

    def __init__(self):
        self._builds = {}

    def __len__(self):
        return len(self._builds)

    def get_build(self, build_id):
        return self._builds.get(build_id)

    def create_build(self, build_data):
        """
        Stores a new build.

        :param build_data: dict with name, total_price and optional components
        :return: the stored Build, with a fresh id and UTC creation time
        """
        build = Build(
            id=str(uuid4()),
            name=build_data["name"],
            total_price=build_data["total_price"],
            components=dict(build_data.get("components") or {}),
            created_at=datetime.now(pytz.utc),
        )
        self._builds[build.id] = build
        return build

    def update_build(self, build_id, partial_data):
        """
        Shallow-merges the given fields over a stored build.

        The total price is not recomputed when components change.

        :param build_id: id of the build to update
        :param partial_data: dict with any of name, components, total_price
        :return: the updated Build, or None when the id is unknown
        """
        build = self._builds.get(build_id)
        if not build:
            return None

        changes = {key: partial_data[key] for key in UPDATABLE_FIELDS if key in partial_data}
        if "components" in changes:
            changes["components"] = dict(changes["components"] or {})

        updated = replace(build, **changes)
        self._builds[build_id] = updated
        return updated
