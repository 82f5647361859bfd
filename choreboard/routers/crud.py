"""Generic REST endpoints shared by every entity."""

from dataclasses import dataclass
from typing import Annotated, Dict, List, Optional, Sequence, Tuple, Type

from fastapi import APIRouter, Path, Query, Response
from fastapi.responses import JSONResponse

from choreboard.core import alerts
from choreboard.core.logger import get_logger
from choreboard.domain.records import ID_MAX, ID_MIN, Record
from choreboard.repositories import SQLRepository

logger = get_logger(__name__)

_DIRECTIONS = {"asc": False, "desc": True}

PathId = Annotated[int, Path(ge=ID_MIN, le=ID_MAX)]


@dataclass(frozen=True)
class EntityResource:
    """How one model is exposed under ``/api/{path}``.

    ``record`` validates request bodies, ``view`` shapes responses (defaults to
    ``record``). Every name in ``relations`` is a many-to-one reference stored in
    a ``<relation>_id`` column.
    """

    name: str
    path: str
    model: type
    record: Type[Record]
    view: Optional[Type[Record]] = None
    relations: Tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.model.__name__

    @property
    def view_type(self) -> Type[Record]:
        return self.view or self.record

    def to_model(self, record: Record):
        data = record.model_dump(exclude=set(self.relations))
        for relation in self.relations:
            ref = getattr(record, relation)
            data[f"{relation}_id"] = ref.id if ref is not None else None
        return self.model(**data)

    def sortable_fields(self) -> Dict[str, str]:
        """Wire name (camelCase or snake_case) -> model attribute."""
        fields: Dict[str, str] = {}
        for name, info in self.record.model_fields.items():
            if name in self.relations:
                continue
            fields[name] = name
            if info.alias:
                fields[info.alias] = name
        return fields


def failure_response(entity_name: str, error_key: str, message: str, status_code: int = 400, **extra) -> JSONResponse:
    body = {"entityName": entity_name, "errorKey": error_key, "message": message, **extra}
    return JSONResponse(body, status_code=status_code, headers=alerts.failure_alert(entity_name, error_key))


def parse_sort(values: Sequence[str], sortable: Dict[str, str]) -> List[Tuple[str, bool]]:
    """Parse ``sort=field,desc`` query values; ``sort=a,b,asc`` orders by both."""
    order: List[Tuple[str, bool]] = []
    for value in values:
        parts = [part.strip() for part in value.split(",") if part.strip()]
        descending = False
        if parts and parts[-1].lower() in _DIRECTIONS:
            descending = _DIRECTIONS[parts.pop().lower()]
        for part in parts:
            if part not in sortable:
                raise ValueError(f"Cannot sort by '{part}'")
            order.append((sortable[part], descending))
    return order


def _set_headers(response: Response, headers: Dict[str, str]) -> None:
    for key, value in headers.items():
        response.headers[key] = value


def crud_router(resource: EntityResource, repository: SQLRepository) -> APIRouter:
    """Build POST/PUT/GET/DELETE endpoints for ``resource`` backed by ``repository``."""
    router = APIRouter(prefix=f"/api/{resource.path}", tags=[resource.path])
    record_type = resource.record
    view_type = resource.view_type
    sortable = resource.sortable_fields()

    def _view(entity) -> Record:
        return view_type.model_validate(entity)

    def _create(record: Record, response: Response):
        if record.id is not None:
            return failure_response(
                resource.name, "idexists", f"A new {resource.name} cannot already have an ID"
            )
        result = repository.save(resource.to_model(record))
        response.status_code = 201
        response.headers["Location"] = f"/api/{resource.path}/{result.id}"
        _set_headers(response, alerts.entity_creation_alert(resource.name, str(result.id)))
        return _view(result)

    @router.post("", response_model=view_type, status_code=201)
    def create_entity(record: record_type, response: Response):
        logger.debug("REST request to save %s : %s", resource.label, record)
        return _create(record, response)

    @router.put("", response_model=view_type)
    def update_entity(record: record_type, response: Response):
        logger.debug("REST request to update %s : %s", resource.label, record)
        if record.id is None:
            return _create(record, response)
        result = repository.save(resource.to_model(record))
        _set_headers(response, alerts.entity_update_alert(resource.name, str(record.id)))
        return _view(result)

    @router.get("", response_model=List[view_type])
    def list_entities(sort: List[str] = Query(default=[])):
        logger.debug("REST request to get all %s", resource.label)
        try:
            order = parse_sort(sort, sortable)
        except ValueError as exc:
            return failure_response(resource.name, "sortinvalid", str(exc))
        return [_view(entity) for entity in repository.find_all(order)]

    @router.get("/{entity_id}", response_model=view_type)
    def get_entity(entity_id: PathId):
        logger.debug("REST request to get %s : %s", resource.label, entity_id)
        entity = repository.find_one(entity_id)
        if entity is None:
            return Response(status_code=404)
        return _view(entity)

    @router.delete("/{entity_id}")
    def delete_entity(entity_id: PathId):
        logger.debug("REST request to delete %s : %s", resource.label, entity_id)
        repository.delete(entity_id)
        return Response(status_code=200, headers=alerts.entity_deletion_alert(resource.name, str(entity_id)))

    return router
