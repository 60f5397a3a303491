"""Translation between wire models and ``cases`` table rows.

Four array fields are stored as JSON text. Their elements keep the camelCase
keys used on the wire, so a stored value can be handed to a client as is.
Everything else is a scalar passthrough.
"""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Type
import json

from crm_shared.models import Case
from crm_shared.schemas.case import (
    Activity,
    Attachment,
    CaseBase,
    CaseResponse,
    CaseUpdate,
    Communication,
)

SCALAR_FIELDS = (
    "case_number",
    "account_id",
    "account_name",
    "type",
    "sub_type",
    "status",
    "priority",
    "sla_status",
    "sla_deadline",
    "sla_time_remaining",
    "owner",
    "team",
    "created_date",
    "updated_date",
    "description",
    "resolution",
    "pending_reason",
)

# element model per JSON column; None means plain JSON values
JSON_ARRAY_FIELDS: Dict[str, Optional[Type[BaseModel]]] = {
    "communications": Communication,
    "activities": Activity,
    "attachments": Attachment,
    "related_cases": None,
}


def encode_json_array(values: Optional[List[Any]]) -> str:
    """Serialize a list to JSON text. ``None`` encodes as an empty array."""
    return json.dumps(values if values is not None else [])


def decode_json_array(text: Optional[str]) -> List[Any]:
    """Parse JSON array text. Missing or empty text decodes to ``[]``."""
    if not text:
        return []
    value = json.loads(text)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Expected a JSON array, got {type(value).__name__}")
    return value


def _encode_field(values: Optional[List[Any]]) -> str:
    if values is None:
        return encode_json_array(None)
    return encode_json_array([
        v.model_dump(mode="json", by_alias=True, exclude_none=True)
        if isinstance(v, BaseModel) else v
        for v in values
    ])


def _decode_field(name: str, text: Optional[str]) -> List[Any]:
    element_model = JSON_ARRAY_FIELDS[name]
    values = decode_json_array(text)
    if element_model is None:
        return values
    return [element_model.model_validate(v) for v in values]


def case_item_to_row(item: CaseBase) -> Dict[str, Any]:
    """Full column payload for inserting ``item``."""
    row = item.model_dump(mode="json", include=set(SCALAR_FIELDS))
    for name in JSON_ARRAY_FIELDS:
        row[name] = _encode_field(getattr(item, name))
    return row


def case_update_to_row(patch: CaseUpdate) -> Dict[str, Any]:
    """Column updates for the fields present in ``patch``, and only those."""
    supplied = patch.model_fields_set
    row = patch.model_dump(
        mode="json",
        include=supplied & set(SCALAR_FIELDS),
    )
    for name in JSON_ARRAY_FIELDS:
        if name in supplied:
            row[name] = _encode_field(getattr(patch, name))
    return row


def case_row_to_item(row: Case) -> CaseResponse:
    """Materialize a stored case, decoding its JSON columns."""
    data: Dict[str, Any] = {"id": row.id}
    for name in SCALAR_FIELDS:
        data[name] = getattr(row, name)
    for name in JSON_ARRAY_FIELDS:
        data[name] = _decode_field(name, getattr(row, name))
    return CaseResponse.model_validate(data)


__all__ = [
    "SCALAR_FIELDS",
    "JSON_ARRAY_FIELDS",
    "encode_json_array",
    "decode_json_array",
    "case_item_to_row",
    "case_update_to_row",
    "case_row_to_item",
]
