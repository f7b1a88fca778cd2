"""
Configuration commune des schémas : champs Python en snake_case, JSON en camelCase
(firstName, maxCapacity, teacherId...) comme l'attend l'interface d'administration.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
